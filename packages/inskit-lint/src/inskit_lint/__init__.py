__version__ = "0.1.0"

__all__ = [
    "__version__",
    "cli",
    "config",
    "contracts",
    "core",
    "document",
    "errors",
    "exit_codes",
    "library",
    "manifest",
    "report",
    "rules",
    "validator",
]
