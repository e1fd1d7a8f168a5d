"""Lectura de la lista de mods exportada y del fichero de token.

Formatos aceptados (separados por cualquier espacio en blanco):
- `https://mod.io/g/<game>/m/<name_id>`
- `https://mod.io/g/<game>/m/<name_id>#<mod_id>`
- `https://mod.io/g/<game>/m/<name_id>#<mod_id>/<modfile_id>`
- `<mod_id>` numérico
- `<name_id>` suelto

Cualquier otro token hace que la lista sea inválida (error fatal).
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from modcheck.core.domain.models import ModReference, ReferenceKind
from modcheck.core.errors import ModListError, TokenFileError

logger = logging.getLogger(__name__)

_RE_ID = re.compile(r"^\d+$")
_RE_NAME_ID = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


def mod_url_pattern(game_slug: str = "drg") -> re.Pattern[str]:
    return re.compile(
        rf"^https://mod\.io/g/{re.escape(game_slug)}/m/(?P<name_id>[^/#\s]+)"
        r"(?:#(?P<mod_id>\d+)(?:/(?P<modfile_id>\d+))?)?$"
    )


def parse_reference(token: str, position: int, *, game_slug: str = "drg") -> ModReference | None:
    """Interpreta un token; devuelve `None` si no es una referencia válida."""

    match = mod_url_pattern(game_slug).match(token)
    if match:
        mod_id = int(match.group("mod_id")) if match.group("mod_id") else None
        modfile_id = int(match.group("modfile_id")) if match.group("modfile_id") else None
        if (mod_id is not None and mod_id < 1) or (modfile_id is not None and modfile_id < 1):
            return None
        return ModReference(
            raw=token,
            position=position,
            kind=ReferenceKind.URL,
            name_id=match.group("name_id"),
            mod_id=mod_id,
            modfile_id=modfile_id,
        )
    if _RE_ID.match(token):
        mod_id = int(token)
        if mod_id < 1:
            return None
        return ModReference(raw=token, position=position, kind=ReferenceKind.ID, mod_id=mod_id)
    if _RE_NAME_ID.match(token):
        return ModReference(raw=token, position=position, kind=ReferenceKind.NAME_ID, name_id=token)
    return None


def parse_mod_list(text: str, *, game_slug: str = "drg") -> list[ModReference]:
    """Convierte el texto de la lista en referencias, conservando orden y duplicados."""

    references: list[ModReference] = []
    invalid: list[str] = []
    for position, token in enumerate(text.split(), start=1):
        reference = parse_reference(token, position, game_slug=game_slug)
        if reference is None:
            invalid.append(f"#{position} {token!r}")
            continue
        references.append(reference)

    if invalid:
        shown = ", ".join(invalid[:5])
        if len(invalid) > 5:
            shown += f" ... and {len(invalid) - 5} more"
        raise ModListError(f"malformed mod list: unrecognized entries {shown}")

    logger.debug("parsed %d mod references", len(references))
    return references


def load_mod_list(path: Path, *, game_slug: str = "drg") -> list[ModReference]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ModListError(f"mod list `{path}` does not exist") from exc
    except UnicodeDecodeError as exc:
        raise ModListError(f"mod list `{path}` is not valid UTF-8") from exc
    except OSError as exc:
        raise ModListError(f"cannot read mod list `{path}`: {exc.strerror or exc}") from exc
    return parse_mod_list(text, game_slug=game_slug)


def load_token(path: Path) -> str:
    """Lee el token OAuth2 (bearer) y lo devuelve sin espacios alrededor."""

    try:
        token = path.read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        raise TokenFileError(f"access token file `{path}` does not exist") from exc
    except UnicodeDecodeError as exc:
        raise TokenFileError(f"access token file `{path}` is not valid UTF-8") from exc
    except OSError as exc:
        raise TokenFileError(f"cannot read access token file `{path}`: {exc.strerror or exc}") from exc

    if not token:
        raise TokenFileError(f"access token file `{path}` is empty")
    # Va tal cual en la cabecera `Authorization`: solo ASCII imprimible, sin espacios.
    if not token.isascii() or not token.isprintable() or any(ch.isspace() for ch in token):
        raise TokenFileError(f"access token file `{path}` contains invalid characters")
    return token
