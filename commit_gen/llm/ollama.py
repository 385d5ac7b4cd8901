"""Ollama LLM Client for Local Models"""

import os
import json
import http.client
import socket
import urllib.request
import urllib.error

from commit_gen.llm.base import LLMClient, LLMResponse, LLMError, SYSTEM_PROMPT


class OllamaClient(LLMClient):
    """Ollama client for local models. Requires: ollama serve"""

    DEFAULT_MODEL = "mistral:7b"
    DEFAULT_HOST = "http://localhost:11434"
    DEFAULT_TIMEOUT = 300  # 5 minutes for CPU inference

    def __init__(self, model: str | None = None, host: str | None = None):
        self.model = model or self.DEFAULT_MODEL
        self.host = host or os.environ.get("OLLAMA_HOST", self.DEFAULT_HOST)
        self.timeout = self._read_timeout()
        self._verify_connection()

    def _read_timeout(self) -> int:
        raw = os.environ.get("CG_TIMEOUT")
        if raw is None:
            return self.DEFAULT_TIMEOUT
        try:
            return int(raw)
        except ValueError:
            raise LLMError(f"Invalid CG_TIMEOUT: {raw!r} (expected whole seconds)")

    @property
    def name(self) -> str:
        return f"Ollama ({self.model})"

    def _verify_connection(self) -> None:
        """Check if Ollama is running and accessible."""
        try:
            req = urllib.request.Request(f"{self.host}/api/tags")
            with urllib.request.urlopen(req, timeout=5):
                pass
        except (urllib.error.URLError, OSError):
            raise LLMError("Ollama not running. Start with: ollama serve")

    def _call_api(self, prompt: str) -> dict:
        """Make a single API call to Ollama."""
        url = f"{self.host}/api/generate"
        payload = {
            "model": self.model,
            "prompt": prompt,
            "system": SYSTEM_PROMPT,
            "stream": False,
            "keep_alive": "10m",
            "options": {
                "temperature": 0.4,
                "num_predict": 1000,
            }
        }

        data = json.dumps(payload).encode('utf-8')
        req = urllib.request.Request(url, data=data, headers={"Content-Type": "application/json"})

        with urllib.request.urlopen(req, timeout=self.timeout) as response:
            return json.loads(response.read().decode('utf-8'))

    def generate(self, prompt: str) -> LLMResponse:
        """Call Ollama's generate API."""
        try:
            result = self._call_api(prompt)
        except urllib.error.HTTPError as e:
            if e.code == 404:
                raise LLMError(f"Model '{self.model}' not found. Run: ollama pull {self.model}")
            raise LLMError(f"Ollama error ({e.code}): {e.reason}")
        except urllib.error.URLError as e:
            if isinstance(e.reason, socket.timeout):
                raise LLMError(f"Request timed out after {self.timeout}s. Increase timeout: set CG_TIMEOUT=600")
            if "Connection refused" in str(e):
                raise LLMError("Ollama not running. Start with: ollama serve")
            raise LLMError(f"Ollama request failed: {e}")
        except socket.timeout:
            raise LLMError(f"Request timed out after {self.timeout}s. Increase timeout: set CG_TIMEOUT=600")
        except json.JSONDecodeError:
            raise LLMError("Invalid response from Ollama. Try a different model or simpler change.")
        except http.client.HTTPException as e:
            raise LLMError(f"Incomplete response from Ollama: {e}. The model may have run out of memory.")
        except OSError as e:
            raise LLMError(f"Connection to Ollama lost: {e}. Check that 'ollama serve' is still running.")

        return LLMResponse(
            content=result.get("response", "").strip(),
            model=self.model,
            tokens_used=result.get("eval_count", 0)
        )
