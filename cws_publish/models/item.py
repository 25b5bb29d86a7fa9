# cws_publish/models/item.py
"""Chrome Web Store API models"""

from dataclasses import dataclass, field
from typing import Dict, List, Any


def lookup_field(data: Dict[str, Any], key: str, default: Any = None) -> Any:
    """Case-insensitive dictionary lookup"""
    if key in data:
        return data[key]
    lowered = key.lower()
    for candidate, value in data.items():
        if isinstance(candidate, str) and candidate.lower() == lowered:
            return value
    return default


@dataclass
class AccessToken:
    """OAuth2 access token"""
    token: str
    type: str

    @property
    def authorization(self) -> str:
        """Value for the Authorization header"""
        return f"{self.type} {self.token}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AccessToken':
        """Create from token endpoint response"""
        return cls(
            token=str(lookup_field(data, 'access_token') or ''),
            type=str(lookup_field(data, 'token_type') or '')
        )

    def __repr__(self) -> str:
        return f"AccessToken(type={self.type!r}, token='***')"


@dataclass
class ItemError:
    """Error reported for a store item"""
    code: str
    detail: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ItemError':
        return cls(
            code=str(lookup_field(data, 'error_code', '')),
            detail=str(lookup_field(data, 'error_detail', ''))
        )


@dataclass
class ItemResource:
    """Store item state returned by upload and publish requests"""
    id: str = ''
    kind: str = ''
    upload_state: str = ''
    item_errors: List[ItemError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.item_errors)

    def log_fields(self) -> Dict[str, str]:
        """Flatten into fields for structured log records"""
        fields = {
            'ID': self.id,
            'Kind': self.kind,
            'UploadState': self.upload_state,
        }
        for index, error in enumerate(self.item_errors):
            fields[f'error_{index}_code'] = error.code
            fields[f'error_{index}_detail'] = error.detail
        return fields

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ItemResource':
        """Create from API response body

        Raises:
            ValueError: If the item error list is malformed
        """
        errors = lookup_field(data, 'itemError') or []
        if not isinstance(errors, list) or not all(isinstance(e, dict) for e in errors):
            raise ValueError("itemError must be a list of objects")

        return cls(
            id=str(lookup_field(data, 'id') or ''),
            kind=str(lookup_field(data, 'kind') or ''),
            upload_state=str(lookup_field(data, 'uploadState') or ''),
            item_errors=[ItemError.from_dict(e) for e in errors]
        )
