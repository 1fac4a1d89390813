from dataclasses import dataclass
from enum import Enum, auto


class StatusClass(Enum):
    OK = auto()
    FAILURE = auto()
    SKIPPED = auto()
    CACHED = auto()
    RUNNING = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class TaskResult:
    target: str
    status: str
    command: str | None = None
    stdout: str | None = None
    stderr: str | None = None

    @property
    def has_stdout(self) -> bool:
        return self.stdout is not None

    @property
    def has_stderr(self) -> bool:
        return self.stderr is not None

    def outputs(self) -> list[str]:
        streams = []
        if self.has_stdout:
            streams.append("stdout")
        if self.has_stderr:
            streams.append("stderr")
        return streams
