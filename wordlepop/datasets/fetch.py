"""
Fetch past Wordle answers from wordlehints.co.uk.

- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final 5-letter UPPERCASE token as the answer.
- Lowercases and de-duplicates while preserving calendar order.
"""

from __future__ import annotations

import logging
import re
from typing import List

import requests
from bs4 import BeautifulSoup

from .wordlist import unique_preserve_order

logger = logging.getLogger(__name__)

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def parse_answers(html: str) -> List[str]:
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL, timeout: float = 30) -> List[str]:
    """Download and parse; HTTP errors propagate as requests.HTTPError."""
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    answers = parse_answers(r.text)
    logger.info("Fetched %d answers from %s", len(answers), url)
    return answers
