"""
Local pattern classifier.

Estimates the complexity of one function from the shape of its own body:
loop and iteration-call nesting, sort calls, halving loops and self
recursion. It never looks at other functions; the propagator does that.
"""

from typing import List, Set, Tuple

from complexity_lens.core.constants import (
    ARRAY_ITERATION_METHODS,
    GEOMETRIC_ASSIGNMENT_OPERATORS,
    HALVING_MATH_CALLS,
    LOOP_NODE_TYPES,
    MEMBER_NODE_TYPES,
    SORT_METHODS,
)
from complexity_lens.engine.lattice import ComplexityClass, from_loop_shape, join
from complexity_lens.engine.syntax import (
    call_arguments,
    callee_of,
    is_identifier,
    is_named_function,
    member_object,
    member_property,
    named_children,
    node_text,
    numeric_value,
    operator_of,
    same_node,
    unwrap,
    walk_body,
)

EMPTY_BODY_TYPES = ("statement_block", "program")


def _is_loop(node) -> bool:
    return node.is_named and node.type in LOOP_NODE_TYPES


def _is_iteration_call(node) -> bool:
    if node.type != "call_expression":
        return False
    return member_property(unwrap(callee_of(node))) in ARRAY_ITERATION_METHODS


def _condition_variables(loop) -> Set[str]:
    """Identifiers read by a loop's condition; `for...of/in` loops have none."""
    condition = loop.child_by_field_name("condition")
    names = set()
    stack = [condition] if condition is not None else []
    while stack:
        node = stack.pop()
        if node.type == "identifier":
            names.add(node_text(node))
        stack.extend(node.children)
    return names


def _math_halving_argument(node):
    """The `x` of `Math.floor(x / k)` (or ceil/trunc) with a constant k > 1."""
    if node is None or node.type != "call_expression":
        return None
    callee = unwrap(callee_of(node))
    if member_property(callee) not in HALVING_MATH_CALLS:
        return None
    if node_text(unwrap(member_object(callee))) != "Math":
        return None
    arguments = call_arguments(node)
    if not arguments:
        return None
    division = unwrap(arguments[0])
    if division is None or division.type != "binary_expression":
        return None
    if operator_of(division) != "/":
        return None
    divisor = numeric_value(division.child_by_field_name("right"))
    if divisor is None or divisor <= 1:
        return None
    return unwrap(division.child_by_field_name("left"))


def _scales(node, variable: str) -> bool:
    """`variable / k`, `variable * k` or `variable >> k` for a constant k."""
    node = unwrap(node)
    if node is None or node.type != "binary_expression":
        return False
    operator = operator_of(node)
    if operator not in ("/", "*", ">>", ">>>"):
        return False
    left = node.child_by_field_name("left")
    right = node.child_by_field_name("right")
    if operator == "*" and not is_identifier(left):
        left, right = right, left
    if not is_identifier(left) or node_text(unwrap(left)) != variable:
        return False
    factor = numeric_value(right)
    if factor is None:
        return False
    return factor >= 1 if operator in (">>", ">>>") else factor > 1


def _updates_geometrically(node, variables: Set[str]) -> bool:
    """Does `node` scale one of `variables` by a constant factor?"""
    if node.type not in ("augmented_assignment_expression", "assignment_expression"):
        return False
    target = unwrap(node.child_by_field_name("left"))
    if target is None or target.type != "identifier":
        return False
    name = node_text(target)
    if name not in variables:
        return False

    value = node.child_by_field_name("right")
    if node.type == "augmented_assignment_expression":
        operator = operator_of(node)
        if operator not in GEOMETRIC_ASSIGNMENT_OPERATORS:
            return False
        factor = numeric_value(value)
        if factor is None:
            return False
        return factor >= 1 if operator in (">>=", ">>>=", "<<=") else factor > 1

    if _scales(value, name):
        return True
    halved = _math_halving_argument(unwrap(value))
    return is_identifier(halved) and node_text(halved) == name


def _is_midpoint(node, variables: Set[str]) -> bool:
    """`Math.floor((lo + hi) / 2)` or `(lo + hi) >> 1` over condition variables."""
    if node.type == "call_expression":
        span = _math_halving_argument(node)
    elif node.type == "binary_expression" and operator_of(node) in (">>", ">>>"):
        shift = numeric_value(node.child_by_field_name("right"))
        if shift is None or shift < 1:
            return False
        span = unwrap(node.child_by_field_name("left"))
    else:
        return False

    if span is None or span.type != "binary_expression":
        return False
    if operator_of(span) not in ("+", "-"):
        return False
    operands = (span.child_by_field_name("left"), span.child_by_field_name("right"))
    return all(
        is_identifier(operand) and node_text(unwrap(operand)) in variables
        for operand in operands
    )


class PatternClassifier:
    """
    Heuristic classifier for a single function body.

    This uses the tree-sitter syntax tree of the body; it is a pure function
    of that subtree and the function's own name.
    """

    def classify(
        self, body_node, name: str, is_method: bool = False
    ) -> Tuple[ComplexityClass, List[str]]:
        """
        Classify one function body.

        Args:
            body_node: Body subtree (statement block, expression or program)
            name: The function's own name, used to spot self recursion
            is_method: Methods recurse through `this.<name>(...)`; other
                functions through a bare `<name>(...)` call

        Returns:
            (local complexity, evidence strings)
        """
        evidence: List[str] = []
        if body_node is None or (
            body_node.type in EMPTY_BODY_TYPES and not named_children(body_node)
        ):
            return ComplexityClass.CONSTANT, ["empty body"]

        complexity = ComplexityClass.CONSTANT

        # Loops, iteration calls and halving loops
        linear, log, loops, iterations = self._measure_nesting(body_node)
        nesting = from_loop_shape(linear, log)
        if loops or iterations:
            evidence.append(
                f"loop nesting: {linear} linear, {log} halving "
                f"({loops} loop(s), {iterations} iteration call(s)) -> {nesting.display}"
            )
        complexity = join(complexity, nesting)

        # Sorting
        sorts = self._count_sort_calls(body_node)
        if sorts:
            evidence.append(f"{sorts} sort call(s) -> O(n log n)")
            complexity = join(complexity, ComplexityClass.LINEARITHMIC)

        # Self recursion
        recursion, reason = self._classify_recursion(body_node, name, is_method)
        if reason:
            evidence.append(reason)
            complexity = join(complexity, recursion)

        if not evidence:
            evidence.append("no loops, sorting or recursion -> O(1)")
        return complexity, evidence

    def _measure_nesting(self, body_node) -> Tuple[int, int, int, int]:
        """
        Find the most expensive nest of loops on any path through the body.

        Returns:
            (linear depth, halving depth, loop count, iteration-call count)
            for the deepest path, with totals for the whole body.
        """
        best = (0, 0)
        best_class = ComplexityClass.CONSTANT
        loops = 0
        iterations = 0

        stack = [(body_node, 0, 0)]
        while stack:
            node, linear, log = stack.pop()
            if node.type == "comment":
                continue
            if node is not body_node and is_named_function(node):
                continue

            if _is_loop(node):
                loops += 1
                if self._is_halving_loop(node):
                    log += 1
                else:
                    linear += 1
                shape = from_loop_shape(linear, log)
                if shape > best_class or (shape == best_class and (linear, log) > best):
                    best, best_class = (linear, log), shape
                stack.extend((child, linear, log) for child in reversed(node.children))
            elif _is_iteration_call(node):
                iterations += 1
                shape = from_loop_shape(linear + 1, log)
                if shape > best_class or (shape == best_class and (linear + 1, log) > best):
                    best, best_class = (linear + 1, log), shape
                # Only the callback is nested; `a.map(f).filter(g)` is sequential
                arguments = node.child_by_field_name("arguments")
                for child in reversed(node.children):
                    inner = linear + 1 if same_node(child, arguments) else linear
                    stack.append((child, inner, log))
            else:
                stack.extend((child, linear, log) for child in reversed(node.children))

        return best[0], best[1], loops, iterations

    def _is_halving_loop(self, loop) -> bool:
        """
        Does the loop shrink or grow its own bound geometrically?

        Only variables read by the loop condition count: `i *= 2` in the
        header of `for (...; i < n; ...)`, `n >>= 1` under `while (n > 0)`, or a
        binary-search midpoint over `lo` and `hi`. Scaling any other value
        leaves the loop linear.
        """
        variables = _condition_variables(loop)
        if not variables:
            return False

        stack = list(loop.children)
        while stack:
            node = stack.pop()
            if node.type == "comment":
                continue
            if _is_loop(node) or _is_iteration_call(node) or is_named_function(node):
                continue
            if _updates_geometrically(node, variables) or _is_midpoint(node, variables):
                return True
            stack.extend(node.children)
        return False

    def _count_sort_calls(self, body_node) -> int:
        count = 0
        for node in walk_body(body_node):
            if node.type != "call_expression":
                continue
            if member_property(unwrap(callee_of(node))) in SORT_METHODS:
                count += 1
        return count

    def _self_call_sites(self, body_node, name: str, is_method: bool) -> list:
        sites = []
        for node in walk_body(body_node):
            if node.type != "call_expression":
                continue
            callee = unwrap(callee_of(node))
            if callee is None:
                continue
            # A method's own name is not in scope as a bare identifier
            if callee.type == "identifier":
                if not is_method and node_text(callee) == name:
                    sites.append(node)
            elif is_method and member_property(callee) == name:
                receiver = unwrap(member_object(callee))
                if receiver is not None and receiver.type == "this":
                    sites.append(node)
        return sites

    def _classify_recursion(
        self, body_node, name: str, is_method: bool
    ) -> Tuple[ComplexityClass, str]:
        """Complexity contributed by self recursion, with a reason ('' if none)."""
        sites = self._self_call_sites(body_node, name, is_method)
        if not sites:
            return ComplexityClass.CONSTANT, ""

        if len(sites) > 1:
            return (
                ComplexityClass.EXPONENTIAL,
                f"branching recursion: {len(sites)} self-call sites -> O(2^n)",
            )

        arguments = call_arguments(sites[0])
        if not arguments:
            return (
                ComplexityClass.EXPONENTIAL,
                "self-call without arguments -> O(2^n)",
            )

        argument = arguments[0]
        complexity = self._argument_complexity(argument)
        return (
            complexity,
            f"self-call on `{node_text(argument)}` -> {complexity.display}",
        )

    def _argument_complexity(self, argument) -> ComplexityClass:
        """Map the first argument of the single self-call to a class."""
        arg = unwrap(argument)
        if arg is None:
            return ComplexityClass.EXPONENTIAL

        if arg.type == "identifier" or arg.type in MEMBER_NODE_TYPES:
            return ComplexityClass.LINEAR

        if arg.type != "binary_expression":
            return ComplexityClass.EXPONENTIAL

        operator = operator_of(arg)
        left = arg.child_by_field_name("left")
        right = arg.child_by_field_name("right")

        if operator in ("-", "+"):
            if is_identifier(left) and numeric_value(right) is not None:
                return ComplexityClass.LINEAR
            if operator == "+" and numeric_value(left) is not None and is_identifier(right):
                return ComplexityClass.LINEAR

        if operator in ("/", "*", ">>"):
            operands = [(left, right)]
            if operator == "*":
                operands.append((right, left))
            for variable, constant in operands:
                value = numeric_value(constant)
                if not is_identifier(variable) or value is None:
                    continue
                if value > 1 or (operator == ">>" and value >= 1):
                    return ComplexityClass.LOGARITHMIC

        return ComplexityClass.EXPONENTIAL
