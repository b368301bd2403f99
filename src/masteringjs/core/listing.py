"""Post list fragment."""

from collections.abc import Iterable

from masteringjs.core.types import Post


def render_post_list(posts: Iterable[Post]) -> str:
    """Render posts as a list fragment.

    Posts and their tags keep input order. Values are inserted verbatim.

    Args:
        posts: Posts to list

    Returns:
        HTML fragment wrapped in ``<div class="list">``
    """
    items = "\n".join(_render_post(post) for post in posts)
    return f"""
<div class="list">
  {items}
</div>
"""


def _render_post(post: Post) -> str:
    tags = "\n".join(_render_tag(tag) for tag in post.tags)
    return f"""
<div class="post">
  <div class="title">
    <a href="{post.url}">{post.title}</a>
  </div>
  <div class="description">
    {post.description}
  </div>
  <div class="tags">
    {tags}
  </div>
</div>
"""


def _render_tag(tag: str) -> str:
    return f'<span class="tag">{tag}</span>'
