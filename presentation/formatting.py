# Console rendering helpers

from data.errors import ErrorKind

ERROR_LABELS = {
    ErrorKind.DUPLICATE_KEY: "Duplicate item",
    ErrorKind.NOT_FOUND: "Not found",
    ErrorKind.INVALID_ARGUMENT: "Invalid argument",
    ErrorKind.MISSING_FIELD: "Missing field",
    ErrorKind.INVALID_FORMAT: "Invalid format",
    ErrorKind.PERSISTENCE_FAILURE: "Persistence failure",
}


def describe_error(error):
    """
    Returns a one-line message for a StockkeeperError, labelled by its kind.
    """
    label = ERROR_LABELS.get(getattr(error, "kind", None), "Unexpected error")
    return f"[{label}] {error}"


def render_items(items):
    return [str(item) for item in items]


def print_section(title, lines, leading_blank=False):
    if leading_blank:
        print()
    print(f"== {title} ==")
    for line in lines:
        print(line)
