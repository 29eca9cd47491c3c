"""Fetch METARs from the AWC Text Data Server.

Break-up the XML response into a :class:`METARResponse`.
"""

from typing import Optional, Union

from defusedxml import DefusedXmlException
import defusedxml.ElementTree as ET
import httpx
from pydantic import ValidationError

from pyawc.exceptions import DecodeError, TransportError, UnexpectedStatus
from pyawc.models.metar import METARResponse
from pyawc.query import METARQuery
from pyawc.util import LOG


def process_metar(elem) -> dict:
    """Convert a METAR element into a dict keyed by element name."""
    res = {"sky_condition": []}
    for child in elem:
        if child.tag == "sky_condition":
            res["sky_condition"].append(
                {
                    key: val.strip()
                    for key, val in child.attrib.items()
                    if val.strip() != ""
                }
            )
        elif child.tag == "quality_control_flags":
            res["quality_control_flags"] = {
                flag.tag: flag.text.strip()
                for flag in child
                if flag.text and flag.text.strip()
            }
        elif child.text is not None and child.text.strip() != "":
            res[child.tag] = child.text.strip()
    return res


def _texts(root, path: str) -> list:
    """Return the text of each element found at path."""
    return [elem.text or "" for elem in root.findall(path)]


def parser(text: Union[str, bytes]) -> METARResponse:
    """Parse the XML body of a Text Data Server response.

    Args:
      text (str or bytes): the response body.

    Returns:
      METARResponse

    Raises:
      DecodeError: when the body is not XML, is not a ``response`` document
        or carries values that do not fit the data model.
    """
    try:
        root = ET.fromstring(text)
    except (ET.ParseError, DefusedXmlException) as exp:
        raise DecodeError(f"Failed to parse XML: {exp}") from exp
    if root.tag != "response":
        raise DecodeError(f"Expected <response> root, got <{root.tag}>")
    try:
        return METARResponse(
            errors=_texts(root, "errors/error"),
            warnings=_texts(root, "warnings/warning"),
            metars=[process_metar(m) for m in root.findall("data/METAR")],
        )
    except ValidationError as exp:
        raise DecodeError(f"Response failed validation: {exp}") from exp


def get_metar(
    query: METARQuery,
    client: Optional[httpx.Client] = None,
    timeout: float = 30,
) -> METARResponse:
    """Execute a METARQuery against the Text Data Server.

    Only failures of the request itself raise.  The server reports problems
    with the query as ``errors`` and ``warnings`` on the returned response.

    Args:
      query (METARQuery): the query to run.
      client (httpx.Client): optional client to issue the request with.
      timeout (float): transport timeout in seconds.

    Returns:
      METARResponse

    Raises:
      TransportError: the request could not be completed.
      UnexpectedStatus: the server answered outside of the 2xx range.
      DecodeError: the body could not be parsed.
    """
    url = query.build_url()
    LOG.debug("Fetching %s", url)
    getter = httpx.get if client is None else client.get
    try:
        resp = getter(url, timeout=timeout)
    except httpx.DecodingError as exp:
        LOG.info("get_metar(%s) undecodable body: %s", url, exp)
        raise DecodeError(str(exp)) from exp
    except (httpx.RequestError, httpx.InvalidURL) as exp:
        LOG.info("get_metar(%s) failed: %s", url, exp)
        raise TransportError(str(exp)) from exp
    if resp.status_code < 200 or resp.status_code > 299:
        LOG.info("get_metar(%s) got status %s", url, resp.status_code)
        raise UnexpectedStatus(resp.status_code)
    res = parser(resp.content)
    for error in res.errors:
        LOG.warning("Text Data Server error: %s", error)
    for warning in res.warnings:
        LOG.info("Text Data Server warning: %s", warning)
    return res
