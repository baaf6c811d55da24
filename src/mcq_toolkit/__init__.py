"""Top-level package for the MCQ Toolkit.

Provides subpackages:
- mcq_toolkit.core – fragment/question models, validation, serialization
- mcq_toolkit.extractor – PDF text source and fragment classifier
- mcq_toolkit.assembly – question assembly session and questions.json export
"""


def _get_version() -> str:
    """Installed distribution version, else the version line of a source checkout."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    try:
        return pkg_version("mcq-toolkit")
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            key, _, value = line.partition("=")
            if key.strip() == "version":
                return value.strip().strip('"\'')
    except OSError:
        pass
    return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
