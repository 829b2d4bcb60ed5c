from __future__ import annotations

import sys
from pathlib import Path

from dotenv import load_dotenv

from docbuild.server import get_settings, serve


def main(argv: list[str] | None = None) -> int:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        sys.stderr.write("Please supply a directory to serve")
        return 1

    settings = get_settings().model_copy(update={"site_dir": Path(argv[0])})
    print(f"[info] Serving {settings.site_dir} on http://{settings.host}:{settings.port}")
    serve(settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
