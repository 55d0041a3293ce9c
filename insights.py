import logging
from typing import List, Optional, Protocol, Sequence

from openrouter import OpenRouterLLM
from summary import create_data_summary
from trafficlogs.types import LogEntry, ParsedData, Severity


logger = logging.getLogger(__name__)

DISABLED_MESSAGE = (
    "AI integration is disabled. "
    "Please configure the OPENROUTER_API_KEY environment variable."
)
RECOMMENDATIONS_FAILED = (
    "Error generating recommendations from AI. The API call failed. "
    "Please check your API key and network connection."
)
ROOT_CAUSE_FAILED = "Error generating root cause analysis from AI."

ROOT_CAUSE_SAMPLE_SIZE = 10


# ---------- LLM Interface ----------

class LLMClient(Protocol):
    def complete(self, prompt: str) -> str:
        ...


def default_client() -> Optional[LLMClient]:
    """OpenRouter client, or None when no API key is configured."""
    try:
        return OpenRouterLLM()
    except ValueError:
        logger.warning("OPENROUTER_API_KEY not set; AI insights are disabled")
        return None


def format_log_line(log: LogEntry) -> str:
    return f"{log.timestamp.isoformat()} - {log.device} - {log.severity.value}: {log.message}"


# ---------- Insight Generator ----------

class InsightGenerator:
    """
    Narrative insights over parsed data.

    Never raises: a missing client or a failed call comes back as text.
    """

    def __init__(self, llm: Optional[LLMClient] = None):
        self.llm = llm

    @classmethod
    def from_env(cls) -> "InsightGenerator":
        return cls(default_client())

    @staticmethod
    def error_logs(data: ParsedData) -> List[LogEntry]:
        return [
            log for log in data.logs
            if log.severity in (Severity.ERROR, Severity.WARNING)
        ]

    def recommendations(self, data: ParsedData) -> str:
        return self._complete(self._recommendations_prompt(data), RECOMMENDATIONS_FAILED)

    def root_cause(self, logs: Sequence[LogEntry]) -> str:
        return self._complete(self._root_cause_prompt(logs), ROOT_CAUSE_FAILED)

    def _complete(self, prompt: str, failure_text: str) -> str:
        if self.llm is None:
            return DISABLED_MESSAGE

        try:
            return self.llm.complete(prompt)
        except Exception as e:
            logger.error("LLM call failed: %s", e)
            return failure_text

    # ---------- Prompts ----------

    def _recommendations_prompt(self, data: ParsedData) -> str:
        return f"""
You are a world-class AI expert in Intelligent Transportation Systems (ITS) and Traffic Analytics.
Your task is to analyze a summary of system logs and traffic data to identify potential operational issues and provide actionable recommendations.

Here is the data summary:
{create_data_summary(data)}

Based on this summary, please provide:
1. **Top 3 Key Observations:** Bullet points highlighting the most critical patterns or anomalies you've found.
2. **Potential Root Causes:** For any identified issues (like errors, restarts, or congestion), suggest likely underlying causes.
3. **Actionable Recommendations:** Provide a numbered list of concrete steps that operators or engineers should take to address the issues and improve system performance and traffic flow.

Format your response clearly with markdown for easy readability.
"""

    def _root_cause_prompt(self, logs: Sequence[LogEntry]) -> str:
        snippets = "\n".join(
            format_log_line(log) for log in list(logs)[:ROOT_CAUSE_SAMPLE_SIZE]
        )

        return f"""
You are an ITS system diagnostics expert. Given the following sequence of error and warning logs from a traffic management system, create a plausible root-cause analysis.

Log Snippets:
{snippets}

Task:
1. Identify the primary failure or error event.
2. Describe the likely sequence of preceding events or conditions that led to this failure.
3. Present this as a simple, text-based flow diagram or a numbered list of events. For example:
   1. Condition A (e.g., Network Timeout) occurs.
   2. -> This leads to Component B (e.g., Queue Manager) failing.
   3. -> Resulting in System C (e.g., ALC) initiating a restart.

Be concise and focus on the most probable cause-and-effect chain.
"""
