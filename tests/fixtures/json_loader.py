import copy
import json
from pathlib import Path
from typing import Any, Dict, List


class TestDataLoader:
    """Reads tests/fixtures/test_data.json once and hands out copies"""

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json", encoding="utf-8") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get_copy(cls, key: str) -> Any:
        return copy.deepcopy(cls.load().get(key))

    @classmethod
    def signup(cls, name: str) -> Dict[str, str]:
        """Signup payload for the registrant with the given name"""
        for signup in cls.get_copy("signups"):
            if signup["name"] == name:
                return signup
        raise KeyError(name)

    @classmethod
    def missing_fields_payloads(cls) -> List[Dict[str, Any]]:
        return cls.get_copy("missing_fields_payloads")
