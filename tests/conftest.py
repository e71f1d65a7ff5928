"""Pytest configuration and shared fixtures."""

import warnings


def _check_tkinter():
    """Warn if the tkinter module is missing from this Python build.

    The tests never create a Tk root window; widgets are mocks. They do
    import tkinter though, and some minimal Python builds ship without it
    (e.g. Debian's python3 without the python3-tk package).
    """
    try:
        import tkinter  # noqa: F401
    except ImportError:
        warnings.warn(
            "tkinter is not available. Tests importing framewatch.sources will fail. "
            "Install the Tk bindings for your Python, e.g.: apt install python3-tk",
            stacklevel=1,
        )


_check_tkinter()
