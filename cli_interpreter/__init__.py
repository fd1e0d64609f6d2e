"""cli_interpreter package: an interactive shell with builtin and external command dispatch.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
