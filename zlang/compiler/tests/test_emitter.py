"""Tests for the class definition emitter."""

from zlang.compiler.detokenizer import detokenize
from zlang.compiler.emitter import emit_class, emit_function, emit_operator, replace_class_blocks
from zlang.compiler.lexer import tokenize
from zlang.compiler.registry import collect_classes


def classes_of(source: str):
    return collect_classes(tokenize(source))


def emit(source: str) -> str:
    tokens = tokenize(source)
    return detokenize(replace_class_blocks(tokens, collect_classes(tokens)))


POINT = "class Point { int x; int y; int getX(){ return self.x; } }"


class TestEmitClass:
    def test_struct_and_method_text(self):
        cls = classes_of(POINT)[0]
        assert emit_class(cls) == (
            "typedef struct { int x;int y; } Point;\n"
            "int Point_getX(Point self){return self . x ;}"
        )

    def test_method_params_follow_self(self):
        cls = classes_of("class P { void set(int a, int b){ } }")[0]
        assert emit_function(cls.functions[0]) == "void P_set(P self, int a, int b){}"

    def test_operator_text(self):
        cls = classes_of("class Vec { Vec operator+(Vec other){ return other; } }")[0]
        assert emit_operator(cls.operators[0]) == (
            "Vec Vec_operator_add(Vec self, Vec other){return other ;}"
        )

    def test_operator_without_params(self):
        cls = classes_of("class Counter { Counter operator++(){ return self; } }")[0]
        assert emit_operator(cls.operators[0]) == (
            "Counter Counter_operator_increment(Counter self){return self ;}"
        )

    def test_methods_before_operators(self):
        cls = classes_of(
            "class V { V operator-(V o){ return o; } int len(){ return 0; } }")[0]
        text = emit_class(cls)
        assert text.index("V_len") < text.index("V_operator_sub")

    def test_empty_class(self):
        assert emit_class(classes_of("class E { }")[0]) == "typedef struct {  } E;\n"


class TestReplaceClassBlocks:
    def test_point(self):
        assert emit(POINT) == (
            "typedef struct { int x; int y;} Point;\n"
            "int Point_getX(Point self) { return self.x;}"
        )

    def test_namespace_wrapper_removed(self):
        src = "namespace geo { class Point { int x; int getX(){ return self.x; } } }"
        assert emit(src) == (
            "typedef struct { int x;} geo_Point;\n"
            "int geo_Point_getX(geo_Point self) { return self.x;}"
        )

    def test_surrounding_code_kept(self):
        out = emit("int before;\nclass A { int a; }\nint after;")
        assert out == "int before;\ntypedef struct { int a;} A;\n\nint after;"

    def test_unknown_class_left_alone(self):
        tokens = tokenize("class Foo { int x; }")
        assert detokenize(replace_class_blocks(tokens, [])) == detokenize(tokens)

    def test_same_name_in_two_namespaces(self):
        out = emit("namespace a { class P { int x; } } namespace b { class P { int y; } }")
        assert "typedef struct { int x;} a_P;" in out
        assert "typedef struct { int y;} b_P;" in out
