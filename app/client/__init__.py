from .api_client import ApiError, CodeCopilotClient, format_error_message
from .state import ExpandState, GenerationRefreshSignal, GeneratorView, HistoryView
