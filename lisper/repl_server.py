"""
Simple TCP REPL server for Lisper.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(def x 1) (+ x 2)"}
- Response: {"ok": true, "result": <rendered value>} or {"ok": false, "error": <message>}

One Interpreter is shared by every client so that definitions persist across
requests. Evaluations are serialised: an environment tree is only ever used by
one evaluation at a time.
"""

from __future__ import annotations

import io
import json
import logging
import socket
import threading
from typing import Tuple

from lisper.config import get_repl_address
from lisper.errors import LisperError
from lisper.evaluation.runtime import Runtime
from lisper.interpreter import Interpreter
from lisper.printer import render

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None, max_depth: int | None = None):
        default_host, default_port = get_repl_address()
        self.host = host if host is not None else default_host
        self.port = port if port is not None else default_port
        self._lock = threading.Lock()
        # print output is captured per request and returned with the result
        self._output = io.StringIO()
        self.interp = Interpreter(Runtime(max_depth=max_depth, output=self._output))

    def evaluate(self, code: str) -> dict:
        with self._lock:
            self._output.seek(0)
            self._output.truncate()
            try:
                result = self.interp.eval(code)
            except LisperError as ex:
                return {"ok": False, "error": str(ex), "output": self._output.getvalue()}
            return {"ok": True, "result": render(result), "output": self._output.getvalue()}

    def handle_line(self, line: bytes) -> dict:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected an object"}
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        return self.evaluate(code)

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("REPL server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_line(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.debug("client disconnected: %s:%d", *addr)


if __name__ == "__main__":
    ReplServer().serve_forever()
