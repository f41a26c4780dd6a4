from typing import Dict, Set

SECRET_FIELDS = {"password", "password_hash", "reset_token", "reset_token_expires_at"}


def exclude_keys(data: Dict, keys: Set[str]) -> Dict:
    return {k: v for k, v in data.items() if k not in keys}


def assert_no_secret_fields(data: Dict) -> None:
    leaked = SECRET_FIELDS & set(data)
    assert not leaked, f"secret fields exposed: {sorted(leaked)}"
