"""Script de ejecución.

Permite ejecutar la CLI con `python -m main` desde `src/`, además del script
`graphql-codegen` instalado por pip.
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
