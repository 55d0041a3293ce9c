import json
import os
import urllib.request

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = "google/gemma-3n-e2b-it:free"
ENDPOINT = "https://openrouter.ai/api/v1/chat/completions"


class OpenRouterLLM:
    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout: int | None = None,
        max_tokens: int = 1200,
    ):
        self.api_key = api_key or os.getenv("OPENROUTER_API_KEY")
        if not self.api_key:
            raise ValueError("OPENROUTER_API_KEY not set")

        self.model = model or os.getenv("OPENROUTER_MODEL", DEFAULT_MODEL)
        self.timeout = timeout or int(os.getenv("OPENROUTER_TIMEOUT", "30"))
        self.max_tokens = max_tokens
        self.endpoint = ENDPOINT

    def build_request(self, prompt: str) -> urllib.request.Request:
        payload = {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": prompt,
                }
            ],
            "temperature": 0.3,
            "max_tokens": self.max_tokens,
        }

        return urllib.request.Request(
            self.endpoint,
            data=json.dumps(payload).encode("utf-8"),
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
                "HTTP-Referer": "http://localhost",
                "X-Title": "Traffic Log Insights",
            },
            method="POST",
        )

    def complete(self, prompt: str) -> str:
        req = self.build_request(prompt)

        with urllib.request.urlopen(req, timeout=self.timeout) as resp:
            body = json.loads(resp.read().decode("utf-8"))

        try:
            return body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise RuntimeError(
                f"Unexpected OpenRouter response: {body}"
            ) from e
