import logging
from dataclasses import dataclass, field
from typing import Dict, List

from config import DEFAULT_KEYWORD_COUNT
from utils import count_terms, highlight, top_terms

logger = logging.getLogger(__name__)


@dataclass
class ExtractorState:
    """
    What the page remembers between Streamlit reruns:
      - text:          current contents of the input box
      - keyword_count: how many keywords to pick (the widget keeps it in 1–20)
      - highlighted:   last result; "" means there is nothing to show yet
    """
    text: str = ""
    keyword_count: int = DEFAULT_KEYWORD_COUNT
    highlighted: str = ""
    keywords: List[str] = field(default_factory=list)
    frequencies: Dict[str, int] = field(default_factory=dict)

    @property
    def has_result(self) -> bool:
        return bool(self.highlighted)

    def clear(self) -> None:
        self.highlighted = ""
        self.keywords = []
        self.frequencies = {}

    def submit(self) -> str:
        if not self.text.strip():
            self.clear()
            return self.highlighted
        self.frequencies = count_terms(self.text)
        self.keywords = top_terms(self.frequencies, self.keyword_count)
        self.highlighted = highlight(self.text, self.keywords)
        logger.debug(
            "Extracted %d keyword(s) from %d distinct term(s)",
            len(self.keywords), len(self.frequencies),
        )
        return self.highlighted
