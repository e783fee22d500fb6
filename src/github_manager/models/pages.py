# src/github_manager/models/pages.py
"""
GitHub Pages models: the site itself, its builds, deployments and the
DNS health check.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

from github_manager.models.base import Entity, FieldReader, WireEnum, to_timestamp
from github_manager.models.user import User


class PagesSiteStatus(WireEnum):
    BUILT = 'built'
    BUILDING = 'building'
    ERRORED = 'errored'


class PagesBuildStatus(WireEnum):
    QUEUED = 'queued'
    BUILDING = 'building'
    BUILT = 'built'
    ERRORED = 'errored'


class ProtectedDomainState(WireEnum):
    PENDING = 'pending'
    VERIFIED = 'verified'
    UNVERIFIED = 'unverified'


class BuildType(WireEnum):
    LEGACY = 'legacy'
    WORKFLOW = 'workflow'


class HttpsCertificateState(WireEnum):
    NEW = 'new'
    AUTHORIZATION_CREATED = 'authorization_created'
    AUTHORIZATION_PENDING = 'authorization_pending'
    AUTHORIZED = 'authorized'
    AUTHORIZATION_REVOKED = 'authorization_revoked'
    ISSUED = 'issued'
    UPLOADED = 'uploaded'
    APPROVED = 'approved'
    ERRORED = 'errored'
    BAD_AUTHZ = 'bad_authz'
    DESTROY_PENDING = 'destroy_pending'
    DNS_CHANGED = 'dns_changed'


@dataclass(frozen=True)
class PagesSource(Entity):
    """Branch and folder GitHub publishes the site from."""
    branch: Optional[str] = None
    path: str = '/'

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'PagesSource':
        reader = FieldReader(data)
        return cls(
            branch=reader.get_string('branch'),
            path=reader.get_string('path') or '/'
        )


@dataclass(frozen=True)
class HttpsCertificate(Entity):
    state: Optional[HttpsCertificateState] = None
    description: Optional[str] = None
    domains: Tuple[str, ...] = ()
    expires_at: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'HttpsCertificate':
        reader = FieldReader(data)
        return cls(
            state=reader.get_enum('state', HttpsCertificateState),
            description=reader.get_string('description'),
            domains=reader.get_strings('domains'),
            expires_at=reader.get_string('expires_at')
        )

    @property
    def expires_at_timestamp(self) -> int:
        # expires_at is a plain date (YYYY-MM-DD), read as midnight UTC
        return to_timestamp(self.expires_at)


@dataclass(frozen=True)
class PagesSite(Entity):
    """Configuration of a repository's GitHub Pages site."""
    _wire_names: ClassVar[Dict[str, str]] = {'is_public': 'public'}

    url: Optional[str] = None
    status: Optional[PagesSiteStatus] = None
    cname: Optional[str] = None
    protected_domain_state: Optional[ProtectedDomainState] = None
    pending_domain_unverified_at: Optional[str] = None
    custom_404: bool = False
    html_url: Optional[str] = None
    build_type: Optional[BuildType] = None
    source: Optional[PagesSource] = None
    is_public: bool = False
    https_certificate: Optional[HttpsCertificate] = None
    https_enforced: bool = False

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'PagesSite':
        reader = FieldReader(data)
        return cls(
            url=reader.get_string('url'),
            status=reader.get_enum('status', PagesSiteStatus),
            cname=reader.get_string('cname'),
            protected_domain_state=reader.get_enum('protected_domain_state', ProtectedDomainState),
            pending_domain_unverified_at=reader.get_string('pending_domain_unverified_at'),
            custom_404=reader.get_boolean('custom_404'),
            html_url=reader.get_string('html_url'),
            build_type=reader.get_enum('build_type', BuildType),
            source=reader.get_nested('source', PagesSource),
            is_public=reader.get_boolean('public'),
            https_certificate=reader.get_nested('https_certificate', HttpsCertificate),
            https_enforced=reader.get_boolean('https_enforced')
        )

    @property
    def pending_domain_unverified_at_timestamp(self) -> int:
        return to_timestamp(self.pending_domain_unverified_at)


@dataclass(frozen=True)
class PagesBuild(Entity):
    """
    A single Pages build.

    GitHub nests the failure reason as ``{"error": {"message": ...}}``;
    it is flattened into ``error`` and stays None for successful builds.
    """
    url: Optional[str] = None
    status: Optional[PagesBuildStatus] = None
    error: Optional[str] = None
    pusher: Optional[User] = None
    commit: Optional[str] = None
    duration: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'PagesBuild':
        reader = FieldReader(data)
        return cls(
            url=reader.get_string('url'),
            status=reader.get_enum('status', PagesBuildStatus),
            error=FieldReader(reader.get_object('error')).get_string('message'),
            pusher=reader.get_nested('pusher', User),
            commit=reader.get_string('commit'),
            duration=reader.get_int('duration'),
            created_at=reader.get_string('created_at'),
            updated_at=reader.get_string('updated_at')
        )

    @property
    def created_at_timestamp(self) -> int:
        return to_timestamp(self.created_at)

    @property
    def updated_at_timestamp(self) -> int:
        return to_timestamp(self.updated_at)

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload['error'] = {'message': self.error}
        return payload


@dataclass(frozen=True)
class PagesDeployment(Entity):
    status_url: Optional[str] = None
    page_url: Optional[str] = None
    preview_url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'PagesDeployment':
        reader = FieldReader(data)
        return cls(
            status_url=reader.get_string('status_url'),
            page_url=reader.get_string('page_url'),
            preview_url=reader.get_string('preview_url')
        )


@dataclass(frozen=True)
class PagesDomain(Entity):
    """DNS and HTTPS diagnostics GitHub collected for one domain."""
    host: Optional[str] = None
    uri: Optional[str] = None
    nameservers: Optional[str] = None
    dns_resolves: bool = False
    is_proxied: bool = False
    is_cloudflare_ip: bool = False
    is_fastly_ip: bool = False
    is_old_ip_address: bool = False
    is_a_record: bool = False
    has_cname_record: bool = False
    has_mx_records_present: bool = False
    is_valid_domain: bool = False
    is_apex_domain: bool = False
    should_be_a_record: bool = False
    is_cname_to_github_user_domain: bool = False
    is_cname_to_pages_dot_github_dot_com: bool = False
    is_cname_to_fastly: bool = False
    is_pointed_to_github_pages_ip: bool = False
    is_non_github_pages_ip_present: bool = False
    is_pages_domain: bool = False
    is_served_by_pages: bool = False
    is_valid: bool = False
    reason: Optional[str] = None
    responds_to_https: bool = False
    enforces_https: bool = False
    https_error: Optional[str] = None
    is_https_eligible: bool = False
    caa_error: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'PagesDomain':
        reader = FieldReader(data)
        values: Dict[str, Any] = {}
        for name in ('host', 'uri', 'nameservers', 'reason', 'https_error', 'caa_error'):
            values[name] = reader.get_string(name)
        for name in cls._BOOLEAN_FIELDS:
            values[name] = reader.get_boolean(name)
        return cls(**values)

    _BOOLEAN_FIELDS: ClassVar[Tuple[str, ...]] = (
        'dns_resolves', 'is_proxied', 'is_cloudflare_ip', 'is_fastly_ip',
        'is_old_ip_address', 'is_a_record', 'has_cname_record',
        'has_mx_records_present', 'is_valid_domain', 'is_apex_domain',
        'should_be_a_record', 'is_cname_to_github_user_domain',
        'is_cname_to_pages_dot_github_dot_com', 'is_cname_to_fastly',
        'is_pointed_to_github_pages_ip', 'is_non_github_pages_ip_present',
        'is_pages_domain', 'is_served_by_pages', 'is_valid',
        'responds_to_https', 'enforces_https', 'is_https_eligible',
    )


@dataclass(frozen=True)
class PagesHealthCheck(Entity):
    domain: Optional[PagesDomain] = None
    alt_domain: Optional[PagesDomain] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'PagesHealthCheck':
        reader = FieldReader(data)
        return cls(
            domain=reader.get_nested('domain', PagesDomain),
            alt_domain=reader.get_nested('alt_domain', PagesDomain)
        )
