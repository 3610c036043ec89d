import pytest

from complexity_lens import analyze
from complexity_lens.engine.lattice import ComplexityClass


def complexity_of(source, name, language="javascript"):
    results = {result.name: result for result in analyze(source, language=language)}
    return results[name].complexity


CASES = [
    (
        "constant",
        "function add(a, b) {\n  return a + b;\n}\n",
        "add",
        ComplexityClass.CONSTANT,
    ),
    (
        "single loop",
        """
function sum(arr) {
  let total = 0;
  for (let i = 0; i < arr.length; i++) {
    total += arr[i];
  }
  return total;
}
""",
        "sum",
        ComplexityClass.LINEAR,
    ),
    (
        "sort then iterate",
        """
function printSorted(arr) {
  arr.sort((a, b) => a - b);
  arr.forEach((x) => console.log(x));
}
""",
        "printSorted",
        ComplexityClass.LINEARITHMIC,
    ),
    (
        "two nested loops",
        """
function pairs(arr) {
  for (let i = 0; i < arr.length; i++) {
    for (let j = 0; j < arr.length; j++) {
      console.log(arr[i], arr[j]);
    }
  }
}
""",
        "pairs",
        ComplexityClass.QUADRATIC,
    ),
    (
        "three nested loops",
        """
function triples(n) {
  let count = 0;
  for (let i = 0; i < n; i++) {
    for (let j = 0; j < n; j++) {
      for (let k = 0; k < n; k++) {
        count++;
      }
    }
  }
  return count;
}
""",
        "triples",
        ComplexityClass.CUBIC,
    ),
    (
        "nested iteration callbacks",
        """
const allPairs = (arr) => {
  arr.forEach((a) => {
    arr.forEach((b) => console.log(a, b));
  });
};
""",
        "allPairs",
        ComplexityClass.QUADRATIC,
    ),
    (
        "chained iteration calls",
        """
function evensDoubled(arr) {
  return arr.map((x) => x * 2).filter((x) => x % 4 === 0);
}
""",
        "evensDoubled",
        ComplexityClass.LINEAR,
    ),
    (
        "linear recursion",
        """
function factorial(n) {
  if (n <= 1) return 1;
  return n * factorial(n - 1);
}
""",
        "factorial",
        ComplexityClass.LINEAR,
    ),
    (
        "halving recursion",
        """
function halve(n) {
  if (n <= 1) return 0;
  return 1 + halve(n / 2);
}
""",
        "halve",
        ComplexityClass.LOGARITHMIC,
    ),
    (
        "branching recursion",
        """
function fib(n) {
  if (n < 2) return n;
  return fib(n - 1) + fib(n - 2);
}
""",
        "fib",
        ComplexityClass.EXPONENTIAL,
    ),
    (
        "binary search",
        """
function binarySearch(arr, target) {
  let lo = 0;
  let hi = arr.length - 1;
  while (lo <= hi) {
    const mid = Math.floor((lo + hi) / 2);
    if (arr[mid] === target) return mid;
    if (arr[mid] < target) lo = mid + 1;
    else hi = mid - 1;
  }
  return -1;
}
""",
        "binarySearch",
        ComplexityClass.LOGARITHMIC,
    ),
    (
        "doubling loop",
        """
function logLoop(n) {
  for (let i = 1; i < n; i *= 2) {
    console.log(i);
  }
}
""",
        "logLoop",
        ComplexityClass.LOGARITHMIC,
    ),
    (
        "bit shift loop",
        """
function bitShiftLoop(n) {
  let bits = 0;
  while (n > 0) {
    n >>= 1;
    bits++;
  }
  return bits;
}
""",
        "bitShiftLoop",
        ComplexityClass.LOGARITHMIC,
    ),
    (
        "halving loop inside a linear loop",
        """
function logInsideLoop(n) {
  for (let i = 0; i < n; i++) {
    for (let j = 1; j < n; j *= 2) {
      console.log(i, j);
    }
  }
}
""",
        "logInsideLoop",
        ComplexityClass.LINEARITHMIC,
    ),
    (
        "for-of loop",
        """
function total(items) {
  let sum = 0;
  for (const item of items) {
    sum += item.price;
  }
  return sum;
}
""",
        "total",
        ComplexityClass.LINEAR,
    ),
]


@pytest.mark.parametrize(
    "source,name,expected", [case[1:] for case in CASES], ids=[case[0] for case in CASES]
)
def test_local_patterns(source, name, expected):
    assert complexity_of(source, name) is expected


def test_empty_body():
    [result] = analyze("function noop() {}")
    assert result.complexity is ComplexityClass.CONSTANT
    assert result.evidence == ["empty body"]


def test_method_recursion_through_this():
    source = """
class Countdown {
  run(n) {
    if (n <= 0) return;
    this.run(n - 1);
  }
}
"""
    assert complexity_of(source, "run") is ComplexityClass.LINEAR


def test_evidence_explains_verdict():
    source = """
function fib(n) {
  if (n < 2) return n;
  return fib(n - 1) + fib(n - 2);
}
"""
    [result] = analyze(source)
    assert "branching recursion: 2 self-call sites -> O(2^n)" in result.evidence


def test_loop_in_nested_function_is_not_counted():
    source = """
function outer(arr) {
  function inner(xs) {
    for (const a of xs) {
      for (const b of xs) {
        console.log(a, b);
      }
    }
  }
  return arr.length;
}
"""
    assert complexity_of(source, "outer") is ComplexityClass.CONSTANT
    assert complexity_of(source, "inner") is ComplexityClass.QUADRATIC


def test_comments_are_ignored():
    source = """
function quiet(arr) {
  // for (let i = 0; i < arr.length; i++) {}
  /* arr.forEach((x) => arr.forEach((y) => x + y)); */
  return arr[0];
}
"""
    assert complexity_of(source, "quiet") is ComplexityClass.CONSTANT


def test_typescript():
    source = """
function sum(xs: number[]): number {
  let total: number = 0;
  for (const x of xs) {
    total += x;
  }
  return total;
}
"""
    assert complexity_of(source, "sum", language="typescript") is ComplexityClass.LINEAR


SCALING_INSIDE_LINEAR_LOOPS = """
function halves(arr) {
  const out = [];
  for (let i = 0; i < arr.length; i++) {
    out.push(Math.floor(arr[i] / 2));
  }
  return out;
}

function shiftAll(arr) {
  for (const v of arr) {
    console.log(v >> 1);
  }
}

function powers(arr) {
  let p = 1;
  for (const v of arr) {
    p = p * 2;
  }
  return p;
}

function doubleWhileCounting(n) {
  let i = 0;
  let size = 1;
  while (i < n) {
    size *= 2;
    i++;
  }
  return size;
}
"""


@pytest.mark.parametrize("name", ["halves", "shiftAll", "powers", "doubleWhileCounting"])
def test_scaling_a_value_does_not_make_a_loop_logarithmic(name):
    assert complexity_of(SCALING_INSIDE_LINEAR_LOOPS, name) is ComplexityClass.LINEAR


def test_halving_the_loop_bound():
    source = """
function shrink(n) {
  let steps = 0;
  while (n > 1) {
    n = Math.floor(n / 2);
    steps++;
  }
  return steps;
}

function lowerBound(arr, target) {
  let lo = 0;
  let hi = arr.length;
  while (lo < hi) {
    const mid = (lo + hi) >>> 1;
    if (arr[mid] < target) lo = mid + 1;
    else hi = mid;
  }
  return lo;
}
"""
    assert complexity_of(source, "shrink") is ComplexityClass.LOGARITHMIC
    assert complexity_of(source, "lowerBound") is ComplexityClass.LOGARITHMIC


def test_bare_call_to_method_name_is_not_recursion():
    source = """
class Runner {
  process(items) {
    return process(items.length - 1);
  }
}
"""
    [result] = analyze(source)
    assert result.complexity is ComplexityClass.CONSTANT
    assert result.calls == frozenset({"process"})
