"""
Meta tag extraction from a rendered page.

The page is any object with an awaitable ``evaluate(script)`` method,
normally a Playwright ``Page``. No fallback logic runs here: the script only
reports which tags the document actually carries.
"""
import logging

from social_audit.models import RawMetadata

logger = logging.getLogger(__name__)


EXTRACT_METAS_SCRIPT = """
() => {
    const titleNode = document.querySelector("title");
    const descriptionNode = document.querySelector("meta[name=\\"description\\"]");
    const metas = {
        basic: {
            title: titleNode ? titleNode.textContent.trim() : "",
            description: descriptionNode ? descriptionNode.getAttribute("content") : ""
        },
        facebook: {},
        twitter: {}
    };

    for (const node of document.querySelectorAll("meta[property^=\\"og:\\"]")) {
        metas.facebook[node.getAttribute("property").toLowerCase()] = node.getAttribute("content");
    }

    for (const node of document.querySelectorAll("meta[name^=\\"twitter:\\"]")) {
        metas.twitter[node.getAttribute("name").toLowerCase()] = node.getAttribute("content");
    }

    return metas;
}
"""


async def extract_raw_metadata(page) -> RawMetadata:
    """
    Capture title, description, Open Graph and Twitter tags from a page.

    Args:
        page: Rendered page exposing ``async evaluate(script)``

    Returns:
        RawMetadata with lowercased tag keys

    Raises:
        Whatever ``page.evaluate`` raises; errors are not caught here.
    """
    data = await page.evaluate(EXTRACT_METAS_SCRIPT)
    raw = RawMetadata.from_mapping(data)

    logger.debug(
        f"Extracted {len(raw.facebook)} og:* and {len(raw.twitter)} twitter:* tags"
    )
    return raw
