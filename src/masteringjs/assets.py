"""Asset discovery for bundled stylesheets.

Locates static assets shipped inside the masteringjs package.
"""

from importlib.resources import files
from pathlib import Path


def get_static_dir() -> Path:
    """Return path to bundled static assets.

    Returns:
        Path to the static directory containing the ``assets`` folder.

    Raises:
        FileNotFoundError: If static assets are not bundled.
    """
    static = files("masteringjs").joinpath("static")
    if not static.is_dir():
        msg = "Bundled static assets not found. Reinstall the masteringjs package."
        raise FileNotFoundError(msg)
    return Path(str(static))
