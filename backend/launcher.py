"""Converter desktop launcher — starts the server and opens the browser."""

from __future__ import annotations

import logging
import os
import socket
import sys
import threading
import time
import traceback
import webbrowser

logger = logging.getLogger("astroconv.launcher")


def _get_log_path() -> str:
    """Return a path for the crash log next to the exe."""
    if getattr(sys, "_MEIPASS", None):
        return os.path.join(os.path.dirname(sys.executable), "astroconv_crash.log")
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "astroconv_crash.log")


def find_free_port(host: str) -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((host, 0))
        return s.getsockname()[1]


def open_browser(host: str, port: int) -> None:
    """Wait for the server to start, then open the browser."""
    url = f"http://{host}:{port}"
    for _ in range(50):
        try:
            with socket.create_connection((host, port), timeout=0.1):
                break
        except OSError:
            time.sleep(0.1)
    else:
        logger.warning("Server did not answer on %s, opening the browser anyway", url)
    webbrowser.open(url)


def main() -> None:
    # Startup imports stay inside the crash handler
    import uvicorn

    from astroconv.config import settings

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = settings.host
    port = find_free_port(host)
    print(f"Starting converter on http://{host}:{port}")
    print("Close this window or press Ctrl+C to stop.\n")

    threading.Thread(target=open_browser, args=(host, port), daemon=True).start()

    uvicorn.run(
        "astroconv.main:app",
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


def run() -> int:
    """Run main(), writing any crash to the crash log. Returns the exit code."""
    try:
        main()
    except Exception:
        err = traceback.format_exc()
        print(err)
        # Also write to a crash log file next to the exe
        log_path = _get_log_path()
        try:
            with open(log_path, "w", encoding="utf-8") as f:
                f.write(err)
            print(f"\nCrash log saved to: {log_path}")
        except OSError as exc:
            print(f"\nCould not write crash log: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    code = run()
    if code:
        print("\n--- Converter crashed. Press Enter to close. ---")
        try:
            input()
        except EOFError:
            pass
    sys.exit(code)
