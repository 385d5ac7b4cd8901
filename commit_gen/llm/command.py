"""External Command Client - Generate text with a local CLI binary."""

import shlex
import shutil
import subprocess

from commit_gen.llm.base import LLMClient, LLMResponse, LLMError


class CommandClient(LLMClient):
    """Runs a text-generation binary (e.g. `claude -p`) with the prompt on stdin.

    The command is split into argv and executed without a shell, so diff
    content never reaches a shell parser.
    """

    DEFAULT_COMMAND = "claude -p"

    def __init__(self, command: str | list[str] | None = None, model: str | None = None):
        if isinstance(command, list):
            self.argv = list(command)
        else:
            self.argv = shlex.split(command or self.DEFAULT_COMMAND)
        if not self.argv:
            raise LLMError("No generation command configured")
        self.model = model
        if model:
            self.argv.extend(['--model', model])
        if shutil.which(self.argv[0]) is None:
            raise LLMError(f"Command not found: {self.argv[0]}")

    @property
    def name(self) -> str:
        return f"Command ({self.argv[0]})"

    def generate(self, prompt: str) -> LLMResponse:
        try:
            result = subprocess.run(
                self.argv,
                input=prompt,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
        except subprocess.CalledProcessError as e:
            raise LLMError(f"Generation command failed ({e.returncode}): {shlex.join(self.argv)}\n{e.stderr}")
        except FileNotFoundError:
            raise LLMError(f"Command not found: {self.argv[0]}")

        content = result.stdout.strip()
        if not content:
            raise LLMError(f"Generation command returned no output: {shlex.join(self.argv)}")
        return LLMResponse(content=content, model=self.model or self.argv[0])
