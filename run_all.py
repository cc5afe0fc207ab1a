#!/usr/bin/env python3
"""Run the screening API and, unless --api-only, the Streamlit survey."""

import argparse
import os
import subprocess
import sys
import time
from pathlib import Path
from typing import List, Optional
from urllib.error import URLError
from urllib.request import urlopen

PROJECT_ROOT = Path(__file__).resolve().parent
FRONTEND_ENTRY = PROJECT_ROOT / "sleepscreen" / "frontend" / "Home.py"


def api_command(host: str, port: int) -> List[str]:
    return [sys.executable, "-m", "uvicorn", "sleepscreen.api.main:app", "--host", host, "--port", str(port)]


def ui_command(port: int) -> List[str]:
    return [
        sys.executable, "-m", "streamlit", "run", str(FRONTEND_ENTRY),
        "--server.port", str(port), "--server.headless", "true",
    ]


def api_is_up(base_url: str, timeout: float) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            with urlopen(f"{base_url.rstrip('/')}/health/", timeout=2):
                return True
        except (URLError, OSError):
            time.sleep(0.5)
    return False


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--api-only", action="store_true", help="start the FastAPI service only")
    parser.add_argument("--host", default=os.getenv("API_HOST", "127.0.0.1"))
    parser.add_argument("--api-port", type=int, default=int(os.getenv("API_PORT", "8000")))
    parser.add_argument("--ui-port", type=int, default=int(os.getenv("UI_PORT", "8501")))
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    base_url = f"http://{args.host}:{args.api_port}"
    env = {**os.environ, "SLEEPSCREEN_API_BASE": os.getenv("SLEEPSCREEN_API_BASE", base_url)}

    procs = [subprocess.Popen(api_command(args.host, args.api_port), cwd=PROJECT_ROOT, env=env)]
    if not api_is_up(base_url, timeout=30.0):
        print(f"API did not answer on {base_url}/health/", file=sys.stderr)
        procs[0].terminate()
        return 1
    print(f"API ready at {base_url}")

    if not args.api_only:
        procs.append(subprocess.Popen(ui_command(args.ui_port), cwd=PROJECT_ROOT, env=env))
        print(f"Survey at http://127.0.0.1:{args.ui_port}")

    try:
        while all(proc.poll() is None for proc in procs):
            time.sleep(1.0)
    except KeyboardInterrupt:
        pass
    finally:
        for proc in procs:
            if proc.poll() is None:
                proc.terminate()
                try:
                    proc.wait(timeout=10)
                except subprocess.TimeoutExpired:
                    proc.kill()
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
