"""zlang compiler package."""

from .lexer import Lexer as Lexer, tokenize as tokenize
from .detokenizer import detokenize as detokenize
from .driver import (
    CompileContext as CompileContext,
    compile as compile,
    compile_with_context as compile_with_context,
)
from .imports import ImportResolutionError as ImportResolutionError
