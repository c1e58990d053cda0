"""HTML rendering of the link list."""

import os
from typing import Sequence

from fastapi.templating import Jinja2Templates

from ito.database.models import Link

template_dir = os.path.join(os.path.dirname(__file__), "templates")
templates = Jinja2Templates(directory=template_dir)


def render_links(links: Sequence[Link]) -> str:
    """Render the link list page.
    
    Args:
        links: Links to show, in display order
        
    Returns:
        Complete HTML document
    """
    return templates.get_template("index.html").render(links=list(links))
