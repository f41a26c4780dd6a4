import copy
import json
from pathlib import Path
from typing import Any, Dict


class AccountDataLoader:
    """Account payloads shared by the test suites (fixtures/test_data.json)"""

    __test__ = False
    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def account(cls, key: str) -> Dict[str, str]:
        return copy.deepcopy(cls.load()[key])

    @classmethod
    def login_payload(cls, key: str, use_username: bool = False) -> Dict[str, str]:
        account = cls.load()[key]
        identity = account["username"] if use_username else account["email"]
        return {"identity": identity, "password": account["password"]}
