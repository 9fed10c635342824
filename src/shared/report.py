"""
Science report text.

Turns the configured yield into the sentence returned to callers.
"""

NO_YIELD_REPORT = "No Science Yield!"


def report(yield_science: int) -> str:
    """
    Build the human-readable science report.

    Args:
        yield_science: Configured YIELD_SCIENCE value

    Returns:
        str: Report sentence; a fixed sentinel when the yield is not positive

    Example:
        >>> report(10)
        'Our current science yield is 10'
        >>> report(0)
        'No Science Yield!'
    """
    if yield_science <= 0:
        return NO_YIELD_REPORT
    return f"Our current science yield is {yield_science}"
