"""
Demo Manager - Scaffolds a sample review document.

This module provides a ready-made review so a new user can try the
walkthrough immediately with `narrator init --demo` followed by
`narrator show narrator-demo/review.json`. The sample deliberately has a
long summary, long section explanations (to exercise the overview's
scroll animation) and multiple code blocks per section.
"""

import json
import logging
from pathlib import Path

from .types import CodeBlock, Review, Section

logger = logging.getLogger(__name__)


class DemoManager:
    """
    Manages the creation of the demo review.
    """

    RETRY_PY = """def fetch_with_retry(client, url, attempts=3):
    for attempt in range(attempts):
        try:
            return client.get(url, timeout=5)
        except TimeoutError:
            if attempt == attempts - 1:
                raise
            time.sleep(2 ** attempt)"""

    CONFIG_PY = """MAX_RETRIES = int(os.getenv("APP_MAX_RETRIES", "3"))
REQUEST_TIMEOUT = float(os.getenv("APP_REQUEST_TIMEOUT", "5"))"""

    CALLER_PY = """def load_invoice(invoice_id):
    response = fetch_with_retry(http, f"{BASE_URL}/invoices/{invoice_id}", attempts=MAX_RETRIES)
    response.raise_for_status()
    return Invoice.from_json(response.json())"""

    TEST_PY = """def test_retry_gives_up_after_last_attempt(monkeypatch):
    client = FlakyClient(failures=5)
    with pytest.raises(TimeoutError):
        fetch_with_retry(client, "/ping", attempts=3)
    assert client.calls == 3"""

    def __init__(self, root_dir: Path):
        self.root_dir = root_dir

    @classmethod
    def sample_review(cls) -> Review:
        """Build the in-memory sample review."""
        return Review(
            title="Retry handling for the invoice client",
            summary=(
                "Outbound calls to the billing API now retry on timeouts with "
                "exponential backoff. The retry budget is read from the "
                "environment so operators can tune it per deployment without a "
                "release.\n\n"
                "The invoice loader is the first caller to adopt the helper. "
                "Other callers keep their current behaviour until they opt in."
            ),
            sections=[
                Section(
                    title="Backoff helper",
                    explanation=(
                        "fetch_with_retry wraps a single GET. Timeouts are retried "
                        "with a delay of 1s, 2s, 4s and so on; any other exception "
                        "propagates immediately. The final timeout is re-raised "
                        "unchanged so callers see the original traceback."
                    ),
                    code_blocks=[
                        CodeBlock(
                            lang="python",
                            path="billing/http.py",
                            start_line=12,
                            end_line=19,
                            code=cls.RETRY_PY,
                        ),
                    ],
                    note="Backoff is not jittered yet.",
                ),
                Section(
                    title="Configuration knobs",
                    explanation=(
                        "Two new environment variables control the helper. Both "
                        "fall back to the previous hard-coded values, so existing "
                        "deployments behave exactly as before."
                    ),
                    code_blocks=[
                        CodeBlock(
                            lang="python",
                            path="billing/settings.py",
                            start_line=4,
                            end_line=5,
                            code=cls.CONFIG_PY,
                        ),
                        CodeBlock(
                            lang="python",
                            path="billing/invoices.py",
                            start_line=40,
                            end_line=43,
                            code=cls.CALLER_PY,
                        ),
                    ],
                ),
                Section(
                    title="Test coverage",
                    explanation=(
                        "A fake client that fails a configurable number of times "
                        "checks that the helper stops after the last attempt and "
                        "re-raises."
                    ),
                    code_blocks=[
                        CodeBlock(
                            lang="python",
                            path="tests/test_http.py",
                            start_line=1,
                            end_line=5,
                            code=cls.TEST_PY,
                        ),
                    ],
                ),
            ],
        )

    def provision(self) -> Path:
        """
        Write the sample review to disk.

        Returns:
            Path: The path to the created review file.
        """
        demo_dir = self.root_dir / "narrator-demo"
        demo_dir.mkdir(exist_ok=True)

        review_file = demo_dir / "review.json"
        payload = self.sample_review().model_dump(by_alias=True)
        review_file.write_text(json.dumps(payload, indent=2))

        logger.debug(f"Wrote demo review to {review_file}")
        return review_file
