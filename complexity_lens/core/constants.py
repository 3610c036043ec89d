"""
Constants used throughout the application.
"""

# File names
CONFIG_FILENAME = "complexity_lens_config.json"

# Language configuration
# NOTE: These are dynamically loaded from language plugins
SUPPORTED_LANGUAGES = set()  # Will be populated by plugins
LANGUAGE_ALIASES = {}  # Will be populated by plugins
FILE_EXTENSIONS = {}  # Will be populated by plugins

# Control-flow words that look like calls in source text (`if (`, `for (`, ...)
CONTROL_KEYWORDS = frozenset(
    {
        "for",
        "if",
        "while",
        "switch",
        "return",
        "new",
        "console",
        "class",
        "super",
        "function",
        "import",
        "export",
        "else",
        "do",
        "try",
        "catch",
        "finally",
        "with",
        "typeof",
        "await",
        "yield",
        "delete",
        "void",
    }
)

# Global objects and functions that never resolve to a user function
BUILTIN_GLOBALS = frozenset(
    {
        "Array",
        "ArrayBuffer",
        "BigInt",
        "Boolean",
        "Date",
        "Error",
        "Function",
        "Intl",
        "JSON",
        "Map",
        "Math",
        "Number",
        "Object",
        "Promise",
        "Proxy",
        "RangeError",
        "Reflect",
        "RegExp",
        "Set",
        "String",
        "Symbol",
        "TypeError",
        "WeakMap",
        "WeakSet",
        "alert",
        "clearInterval",
        "clearTimeout",
        "decodeURIComponent",
        "encodeURIComponent",
        "eval",
        "fetch",
        "isFinite",
        "isNaN",
        "parseFloat",
        "parseInt",
        "queueMicrotask",
        "require",
        "setInterval",
        "setTimeout",
        "structuredClone",
    }
)

CALL_DENYLIST = CONTROL_KEYWORDS | BUILTIN_GLOBALS

# Array methods that walk every element of the receiver
ARRAY_ITERATION_METHODS = frozenset(
    {
        "map",
        "forEach",
        "filter",
        "reduce",
        "reduceRight",
        "some",
        "every",
        "find",
        "findIndex",
        "flatMap",
    }
)

SORT_METHODS = frozenset({"sort", "toSorted"})

# Math helpers that turn `x / k` into an integer midpoint
HALVING_MATH_CALLS = frozenset({"floor", "ceil", "trunc"})

# Compound assignments that shrink or grow a loop variable geometrically
GEOMETRIC_ASSIGNMENT_OPERATORS = frozenset({"*=", "/=", ">>=", ">>>=", "<<="})

# tree-sitter node types
LOOP_NODE_TYPES = frozenset(
    {"for_statement", "for_in_statement", "while_statement", "do_statement"}
)

FUNCTION_NODE_TYPES = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "function_expression",
        "function",
        "generator_function",
        "arrow_function",
        "method_definition",
    }
)

MEMBER_NODE_TYPES = frozenset({"member_expression", "subscript_expression"})
