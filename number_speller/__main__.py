"""Package entry point for ``python -m number_speller``.

WHY: Users run the speller as ``python -m number_speller numbers.txt``
for CLI mode, or ``python -m number_speller --serve`` to start the HTTP
API.

HOW: Checks sys.argv for the ``--serve`` flag. If present, launches the
API server with uvicorn. Otherwise, delegates to the CLI's main().

RULES:
- ``--serve`` starts the HTTP API on API_HOST:API_PORT
- Without ``--serve``, falls through to the CLI
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from number_speller.server.app import run_api
        run_api()
    else:
        from number_speller.cli import main
        main()
