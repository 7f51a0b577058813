"""Canonical hosting URLs for the configured fixture repository."""

from __future__ import annotations

import re
from enum import Enum

from repofixtures.config.settings import ConfigurationError, FixtureConfig
from repofixtures.models.repository import Protocol

_HOSTNAME_RE = re.compile(r"(^[^:]*://([^@]*@)?|^[^@/:]+@)([^/:]+).*")
_SCP_LIKE_RE = re.compile(r"^[^@/:]+@[^/:]+:")


class HostingDomain(str, Enum):
    GITHUB = "GitHub"
    BITBUCKET = "Bitbucket"


def parse_domain(value: HostingDomain | str) -> HostingDomain:
    if isinstance(value, HostingDomain):
        return value
    for domain in HostingDomain:
        if str(value).lower() in (domain.value.lower(), domain.name.lower()):
            return domain
    choices = ", ".join(d.value for d in HostingDomain)
    raise ConfigurationError(f"Unknown hosting domain {value!r} (expected one of: {choices})")


def parse_protocol(value: Protocol | str) -> Protocol:
    protocol = value if isinstance(value, Protocol) else None
    if protocol is None:
        for candidate in Protocol:
            if str(value).lower() in (candidate.value.lower(), candidate.name.lower()):
                protocol = candidate
                break
    if protocol is None or protocol is Protocol.LOCAL:
        raise ConfigurationError(f"Unknown hosting protocol {value!r} (expected one of: HTTPS, SSH)")
    return protocol


def host_for(domain: HostingDomain, config: FixtureConfig) -> str:
    if domain is HostingDomain.GITHUB:
        return config.hosts.github
    return config.hosts.bitbucket


def build_url(
    domain: HostingDomain | str,
    protocol: Protocol | str,
    config: FixtureConfig | None = None,
) -> str:
    config = config or FixtureConfig()
    host = host_for(parse_domain(domain), config)
    path = f"{config.identity.owner}/{config.identity.name}.git"
    if parse_protocol(protocol) is Protocol.HTTPS:
        return f"https://{host}/{path}"
    return f"{config.ssh_user}@{host}:{path}"


def url_hostname(url: str) -> str:
    match = _HOSTNAME_RE.match(url)
    if match is None:
        return ""
    return match.group(3)


def url_repository_name(url: str) -> str:
    hostname = url_hostname(url)
    if not hostname:
        return ""
    match = re.match(rf".*{re.escape(hostname)}[/:](.+)", url)
    if match is None:
        return ""
    name = match.group(1)
    return name[: -len(".git")] if name.endswith(".git") else name


def detect_protocol(url: str) -> Protocol:
    if url.startswith("https://") or url.startswith("http://"):
        return Protocol.HTTPS
    if url.startswith("ssh://") or _SCP_LIKE_RE.match(url):
        return Protocol.SSH
    return Protocol.LOCAL
