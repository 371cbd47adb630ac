import base64
import binascii
import logging
import zlib
from typing import Optional

from reg_notify_github.errors import InvalidClientId
from reg_notify_github.logger import PluginLogger
from reg_notify_github.model import ConnectionParameters

logger = logging.getLogger("reg_notify_github")

# raw deflate stream, no zlib header or checksum
_WBITS = -15


def _log_invalid(client_id: str, plugin_logger: Optional[PluginLogger]) -> None:
    if plugin_logger is None:
        logger.error("Invalid client ID: %s", client_id)
    else:
        plugin_logger.error("Invalid client ID: %s", plugin_logger.colors.red(client_id))


def decode_client_id(
    client_id: str, plugin_logger: Optional[PluginLogger] = None
) -> ConnectionParameters:
    """
    Decode a compact client ID into the parameters of the app installation.

    The token is a base64 encoded raw deflate stream of
    ``<version>/<repository>/<installation id>/<owner>``. The version slot is
    not interpreted. Failures are logged to ``plugin_logger`` when given,
    to the package logger otherwise.
    """
    try:
        raw = zlib.decompress(base64.b64decode(client_id), _WBITS).decode("utf-8")
    except (binascii.Error, zlib.error, UnicodeDecodeError) as e:
        _log_invalid(client_id, plugin_logger)
        raise InvalidClientId(client_id, str(e)) from e

    fields = raw.split("/")
    if len(fields) != 4:
        _log_invalid(client_id, plugin_logger)
        raise InvalidClientId(client_id, f"expected 4 fields, got {len(fields)}")

    repository, installation_id, owner = fields[1:]
    return ConnectionParameters(
        repository=repository, installation_id=installation_id, owner=owner
    )


def encode_client_id(params: ConnectionParameters, version: str = "v1") -> str:
    raw = "/".join(
        [version, params.repository, params.installation_id, params.owner]
    ).encode("utf-8")
    compressor = zlib.compressobj(wbits=_WBITS)
    data = compressor.compress(raw) + compressor.flush()
    return base64.b64encode(data).decode("ascii")
