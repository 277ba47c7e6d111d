import sys
import os
import threading
import time

import pytest

# project root = myservice/
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
BACKEND_ROOT = os.path.join(PROJECT_ROOT, "backend")

# Add PROJECT_ROOT and BACKEND_ROOT to sys.path
for path in [PROJECT_ROOT, BACKEND_ROOT]:
    if path not in sys.path:
        sys.path.insert(0, path)


@pytest.fixture
def live_server():
    """Real uvicorn server on an ephemeral port, running in a background thread."""
    from backend.app.main import app
    from backend.app.server import bind_listener, build_server

    sock = bind_listener("127.0.0.1", 0)
    host, port = sock.getsockname()
    server = build_server(app)
    thread = threading.Thread(target=server.run, kwargs={"sockets": [sock]}, daemon=True)
    thread.start()

    deadline = time.time() + 10
    while not server.started:
        if time.time() > deadline:
            raise RuntimeError("live server did not start")
        time.sleep(0.05)

    yield {"url": f"http://{host}:{port}", "host": host, "port": port}

    server.should_exit = True
    thread.join(timeout=10)
    sock.close()
