# src/github_manager/models/license.py
"""
License and code of conduct models.

Repositories embed a short license (key, name, spdx id, urls); the
licenses endpoints return the long form. Both decode into License, the
long-form fields simply stay empty for the embedded shape.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from github_manager.models.base import Entity, FieldReader


@dataclass(frozen=True)
class License(Entity):
    key: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    spdx_id: Optional[str] = None
    node_id: Optional[str] = None
    html_url: Optional[str] = None
    description: Optional[str] = None
    implementation: Optional[str] = None
    permissions: Tuple[str, ...] = ()
    conditions: Tuple[str, ...] = ()
    limitations: Tuple[str, ...] = ()
    body: Optional[str] = None
    featured: bool = False

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'License':
        reader = FieldReader(data)
        return cls(
            key=reader.get_string('key'),
            name=reader.get_string('name'),
            url=reader.get_string('url'),
            spdx_id=reader.get_string('spdx_id'),
            node_id=reader.get_string('node_id'),
            html_url=reader.get_string('html_url'),
            description=reader.get_string('description'),
            implementation=reader.get_string('implementation'),
            permissions=reader.get_strings('permissions'),
            conditions=reader.get_strings('conditions'),
            limitations=reader.get_strings('limitations'),
            body=reader.get_string('body'),
            featured=reader.get_boolean('featured')
        )


@dataclass(frozen=True)
class CodeOfConduct(Entity):
    key: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    body: Optional[str] = None
    html_url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'CodeOfConduct':
        reader = FieldReader(data)
        return cls(
            key=reader.get_string('key'),
            name=reader.get_string('name'),
            url=reader.get_string('url'),
            body=reader.get_string('body'),
            html_url=reader.get_string('html_url')
        )
