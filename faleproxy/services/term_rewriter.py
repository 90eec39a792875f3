import re


class TermRewriter:
    """Whole-word, case-preserving replacement of one term with another.

    The case pattern of each match carries over to the replacement:
    ``YALE`` -> ``FALE``, ``yale`` -> ``fale``, ``Yale`` -> ``Fale``.
    Matches with any other mixed case get the target as configured.
    """

    def __init__(self, source: str, target: str):
        if not source:
            raise ValueError("source term is required")
        self.source = source
        self.target = target
        self._pattern = re.compile(rf"(?<!\w){re.escape(source)}(?!\w)", re.IGNORECASE)

    def _match_case(self, matched: str) -> str:
        if matched.isupper():
            return self.target.upper()
        if matched.islower():
            return self.target.lower()
        if matched[:1].isupper() and matched[1:].islower():
            return self.target[:1].upper() + self.target[1:]
        return self.target

    def count(self, text: str) -> int:
        if not text:
            return 0
        return len(self._pattern.findall(text))

    def rewrite(self, text: str) -> str:
        if not text:
            return text
        return self._pattern.sub(lambda m: self._match_case(m.group(0)), text)
