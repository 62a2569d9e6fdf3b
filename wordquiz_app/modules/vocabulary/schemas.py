from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class VocabularyDTO:
    id: int
    word: str
    meaning: str
    phonetic: str
    topic: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TopicStat:
    name: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
