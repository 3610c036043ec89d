from complexity_lens.engine.records import SourcePosition
from complexity_lens.extractors import SourceDocument, SyntaxTreeExtractor
from complexity_lens.plugins import load_plugin


def extract(source, language="javascript"):
    document = SourceDocument(source, load_plugin(language))
    return SyntaxTreeExtractor().extract(document)


def names(source, language="javascript"):
    return [record.name for record in extract(source, language)]


def test_declarations_and_bindings():
    source = """
function declared() {}
function* generated() {}
const expressed = function () {};
let arrow = (x) => x * 2;
module.exports.exported = function () {};
"""
    assert names(source) == ["declared", "generated", "expressed", "arrow", "exported"]


def test_object_and_class_members():
    source = """
const api = {
  fetchAll: () => {},
  refresh() {},
};

class Store {
  load() {}
  static create() {}
  handler = () => {};
}
"""
    records = extract(source)
    assert [r.name for r in records] == ["fetchAll", "refresh", "load", "create", "handler"]
    assert all(r.is_method for r in records)


def test_named_function_expression_keeps_its_own_name():
    assert names("[1, 2].map(function double(x) { return x * 2; });") == ["double"]


def test_anonymous_functions_are_skipped():
    assert names("[1].forEach(function () {}); [2].map((x) => x);") == []


def test_position_is_the_binding_site():
    records = extract("\n  const area = (r) => {\n    return r * r;\n  };\n")
    assert records[0].position == SourcePosition(1, 8)
    assert not records[0].is_method


def test_body_text_has_no_comments():
    [record] = extract("function f() {\n  // note\n  return 1; /* done */\n}")
    assert "note" not in record.body_text
    assert "done" not in record.body_text
    assert "return 1;" in record.body_text


def test_typescript_members():
    source = """
class Queue<T> {
  private items: T[] = [];
  push(item: T): void {
    this.items.push(item);
  }
}
function size<T>(q: Queue<T>): number {
  return 0;
}
"""
    assert names(source, "typescript") == ["push", "size"]
