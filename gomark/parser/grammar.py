"""Declaration line grammar shared by the section parsers."""

from .models import Variable

FUNC_KEYWORD = "func "
METHOD_PREFIX = "func ("
VALUE_KEYWORDS = ("var ", "const ")


def parse_variable(line: str) -> Variable:
    """Parse one declaration line into a Variable.

    ``var Name Type`` keeps ``Type``; ``const Name = value`` is recognized as
    an assignment but the value is not retained.

    Args:
        line: A ``var``/``const`` declaration, a line inside a block, or an
            interface method signature

    Returns:
        The parsed Variable; an empty Variable for an empty line
    """
    variable = Variable()
    text = line.strip()
    if not text:
        return variable

    variable.definition = text
    for keyword in VALUE_KEYWORDS:
        if text.startswith(keyword):
            text = text[len(keyword) :]
            break

    parts = text.split(maxsplit=1)
    if not parts:
        return variable
    variable.name = parts[0]
    rest = parts[1].strip() if len(parts) > 1 else ""
    if rest and not rest.startswith("="):
        variable.type = rest
    return variable


def is_free_function(line: str) -> bool:
    """Return True for a function declaration without a receiver."""
    return line.startswith(FUNC_KEYWORD) and not line.startswith(METHOD_PREFIX)


def is_method(line: str) -> bool:
    """Return True for a method declaration with a receiver clause."""
    return line.startswith(METHOD_PREFIX)


def get_function_name(line: str) -> str | None:
    """Extract the function or method name from a declaration line.

    ``func (s *Foo) Bar(x int) string`` yields ``Bar``;
    ``func Foo(x int)`` yields ``Foo``.

    Returns:
        The name, or None if the line is not a function declaration
    """
    if not line.startswith(FUNC_KEYWORD):
        return None
    if is_method(line):
        _, _, after_receiver = line.partition(")")
        return after_receiver.strip().split("(")[0]
    return line[len(FUNC_KEYWORD) :].split("(")[0]
