"""Tests for the zlang detokenizer."""

from zlang.compiler.detokenizer import detokenize, needs_space
from zlang.compiler.lexer import tokenize
from zlang.compiler.tokens import Token, TokenType, ident, symbol


def roundtrip(source: str) -> str:
    return detokenize(tokenize(source))


class TestSpacing:
    def test_member_access(self):
        assert detokenize([ident("obj"), symbol("."), ident("member")]) == "obj.member"

    def test_arrow(self):
        assert roundtrip("p -> next") == "p->next"

    def test_function_call(self):
        tokens = [
            ident("func"), symbol("("), ident("arg"), symbol(","),
            Token(TokenType.NUMBER, "42"), symbol(")"),
        ]
        assert detokenize(tokens) == "func(arg, 42)"

    def test_identifier_hugs_closing_brackets(self):
        assert not needs_space(ident("p"), symbol(")"))
        assert not needs_space(ident("i"), symbol("]"))
        assert roundtrip("Point_getX( p ) ; a[ i ]") == "Point_getX(p); a[i]"

    def test_function_definition(self):
        assert roundtrip("int main() { return 0; }") == "int main() { return 0;}"

    def test_prefix_symbol_binds(self):
        assert roundtrip("x = -y") == "x = -y"
        assert roundtrip("a = b + 1") == "a = b +1"

    def test_indexing(self):
        assert roundtrip("a [ i ] = b [ 0 ] ;") == "a[i] = b[0];"

    def test_preprocessor_line(self):
        assert roundtrip("#include <stdio.h>") == "# include <stdio.h>"

    def test_literals_always_spaced(self):
        assert roundtrip('printf("hi");') == 'printf( "hi" );'

    def test_identifiers_spaced(self):
        assert roundtrip("unsigned   int   x") == "unsigned int x"

    def test_comment_then_newline(self):
        assert roundtrip("x; // note\ny;") == "x; // note\ny;"

    def test_no_space_after_comment(self):
        assert roundtrip("/* c */ int") == "/* c */int"

    def test_eof_dropped(self):
        assert detokenize([ident("a"), Token(TokenType.EOF)]) == "a"


class TestNeedsSpace:
    def test_newline_never_spaced(self):
        nl = Token(TokenType.NEWLINE)
        assert not needs_space(nl, ident("a"))
        assert not needs_space(ident("a"), nl)

    def test_words_spaced(self):
        assert needs_space(ident("int"), ident("x"))
        assert needs_space(Token(TokenType.NUMBER, "1"), ident("x"))

    def test_symbol_pairs(self):
        assert not needs_space(symbol("("), symbol(")"))
        assert not needs_space(symbol(";"), symbol("}"))
        assert needs_space(symbol(")"), symbol("{"))

    def test_string_literal(self):
        assert needs_space(symbol("("), Token(TokenType.STRING_LIT, '"s"'))


class TestRoundTrip:
    SAMPLE = (
        "#include <stdio.h>\n"
        "// entry point\n"
        "int main(int argc, char **argv) {\n"
        "    int total = 0x10 + 2.5e3;\n"
        "    for (int i = 0; i < argc; i++) { total += i; }\n"
        "    /* done */\n"
        "    printf(\"%d\\n\", total);\n"
        "    return total > 3 ? 1 : 0;\n"
        "}\n"
    )

    def test_preserves_token_text(self):
        first = [t for t in tokenize(self.SAMPLE)]
        again = tokenize(roundtrip(self.SAMPLE))
        assert [t.value for t in again] == [t.value for t in first]
        assert [t.type for t in again] == [t.type for t in first]

    def test_preserves_newlines(self):
        assert roundtrip(self.SAMPLE).count("\n") == self.SAMPLE.count("\n")

    def test_fixed_point(self):
        once = roundtrip(self.SAMPLE)
        assert roundtrip(once) == once
