from complexity_lens import analyze
from complexity_lens.engine.calls import extract_calls
from complexity_lens.plugins import load_plugin


SOURCE = """
function helper() {
  return 1;
}

function main(arr) {
  console.log(arr);
  const biggest = Math.max(1, 2);
  const parsed = parseInt("3", 10);
  arr.push(helper());
  this.other();
  new Widget();
  return helper() + missing(biggest, parsed);
}
"""


def test_bare_identifier_calls_only():
    results = {result.name: result for result in analyze(SOURCE)}
    assert results["main"].calls == frozenset({"helper", "missing"})
    assert results["helper"].calls == frozenset()


def test_custom_denylist():
    tree = load_plugin("javascript").parse("alpha(); beta(); gamma.delta();")
    assert extract_calls(tree.root_node, denylist={"beta"}) == {"alpha"}


def test_calls_inside_nested_functions_belong_to_them():
    source = """
function outer() {
  function inner() {
    return deep();
  }
  return shallow();
}
"""
    results = {result.name: result for result in analyze(source)}
    assert results["outer"].calls == frozenset({"shallow"})
    assert results["inner"].calls == frozenset({"deep"})


def test_no_body():
    assert extract_calls(None) == set()
