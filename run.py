"""Start the FileTree explorer on localhost and open it in a browser."""

import sys
import threading
import time
import webbrowser
from pathlib import Path

import requests

ROOT = Path(__file__).resolve().parent
PORT = 8501


def open_when_ready(url: str, timeout: float = 30.0) -> bool:
    """Poll ``url`` until it answers 200, then open it. False on timeout."""
    deadline = time.monotonic() + timeout
    with requests.Session() as session:
        while time.monotonic() < deadline:
            try:
                if session.get(url, timeout=2).ok:
                    webbrowser.open(url)
                    return True
            except requests.RequestException:
                pass
            time.sleep(1)
    return False


def main() -> None:
    sys.path.insert(0, str(ROOT / "src"))
    from streamlit.web import bootstrap

    url = f"http://localhost:{PORT}"
    threading.Thread(target=open_when_ready, args=(url,), daemon=True).start()
    bootstrap.run(
        str(ROOT / "src" / "FileTree" / "app.py"),
        False,
        [],
        {"server.headless": True, "server.port": PORT},
    )


if __name__ == "__main__":
    main()
