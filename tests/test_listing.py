"""Tests for the post list fragment."""

from masteringjs.core.listing import render_post_list
from masteringjs.core.types import Post


def _post(url: str, tags: tuple[str, ...] = ()) -> Post:
    return Post(url=url, title=url.strip("/").upper(), description=f"about {url}", tags=tags)


class TestRenderPostList:
    """Tests for render_post_list()."""

    def test__single_post__link_description_then_tags_in_order(self) -> None:
        """Render link, description and tags in order."""
        html = render_post_list([Post(url="/a", title="A", description="d", tags=("x", "y"))])

        link = html.index('<a href="/a">A</a>')
        description = html.index('<div class="description">\n    d\n')
        tag_x = html.index('<span class="tag">x</span>')
        tag_y = html.index('<span class="tag">y</span>')
        assert link < description < tag_x < tag_y

    def test__many_posts__one_block_each_in_input_order(self) -> None:
        """Each post renders exactly once, in the given order."""
        posts = [_post("/c"), _post("/a"), _post("/b")]

        html = render_post_list(posts)

        assert html.count('<div class="post">') == 3
        positions = [html.index(f'href="{p.url}"') for p in posts]
        assert positions == sorted(positions)

    def test__empty_sequence__wrapper_only(self) -> None:
        """No posts still yields the list container."""
        html = render_post_list([])

        assert '<div class="list">' in html
        assert '<div class="post">' not in html

    def test__no_tags__empty_tags_block(self) -> None:
        """A post without tags has no tag spans."""
        html = render_post_list([_post("/a")])

        tags_block = html.split('<div class="tags">')[1].split("</div>")[0]
        assert '<span class="tag">' not in tags_block
        assert tags_block.strip() == ""

    def test__duplicate_tags__kept(self) -> None:
        """Tags are not deduplicated."""
        html = render_post_list([_post("/a", tags=("x", "x"))])

        assert html.count('<span class="tag">x</span>') == 2

    def test__generator_input__accepted(self) -> None:
        """Any iterable of posts is accepted."""
        html = render_post_list(_post(f"/{n}") for n in range(2))

        assert html.count('<div class="post">') == 2
