"""
logger.py

Logging module for huffcodec.

Components never print. They accept an optional Logger and hand it typed
Log records; the logger decides what is kept, shown and saved.
"""


from datetime import datetime
from typing import Union, Optional, Any

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class TreeConstructionLog(Log):
    def __init__(self, leaf_count: int, merge_count: int, depth: int) -> None:
        self.leaf_count = leaf_count
        self.merge_count = merge_count
        self.depth = depth
        super().__init__("Tree_construction_log", LogLevel.INFO,
                         f"Leaves: {leaf_count}, Merges: {merge_count}, Depth: {depth}")


class CodeAssignmentLog(Log):
    def __init__(self, symbol: Any, code: str) -> None:
        self.symbol = symbol
        self.code = code
        super().__init__("Code_assignment_log", LogLevel.INFO, f"Symbol: {symbol}, Code: {code!r}")


class CodingLog(Log):
    def __init__(self, symbol_count: int, encoded_size: int) -> None:
        self.symbol_count = symbol_count
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol count: {symbol_count}, Encoded size: {encoded_size}")


class DecodeStateLog(Log):
    def __init__(self, state: Any) -> None:
        self.state = state
        super().__init__("Decode_state_log", LogLevel.INFO, f"State: {state}")


class PreprocessingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Preprocessing_progress_step", LogLevel.PROGRESS, message)


class CodingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Coding_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.preproc_progress_count = 0
        self.coding_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.preprocessor_step_interval_count = 10000
        self.coding_step_interval_count = 10000

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            self._emit(log, self.record_info, self.display_info)
        elif log.level == LogLevel.WARNING:
            self._emit(log, self.record_warning, self.display_warning)
        elif log.level == LogLevel.ERROR:
            self._emit(log, self.record_error, self.display_error)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, PreprocessingProgressStep):
                self.preproc_progress_count += 1
                count = self.preproc_progress_count
                interval = self.preprocessor_step_interval_count
            elif isinstance(log, CodingProgressStep):
                self.coding_progress_count += 1
                count = self.coding_progress_count
                interval = self.coding_step_interval_count
            else:
                raise ValueError(f"Unknown progress log: {log.type_name}")
            if log.total_steps is not None:
                log.message = f"{log.base_message} ({count}/{log.total_steps})"
            else:
                log.message = f"{log.base_message} ({count})"
            self._emit(log, self.record_progress, self.display_progress and count % interval == 0)

    def _emit(self, log: Log, record: bool, display: bool) -> None:
        if record:
            self.logs.append(log)
        if display:
            print(log)

    def get_logs(self, log_type: type = Log) -> list:
        return [log for log in self.logs if isinstance(log, log_type)]

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
