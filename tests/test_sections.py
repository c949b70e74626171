from bs4 import BeautifulSoup

from frontpage.models import Article
from frontpage.output.formatting import ELLIPSIS
from frontpage.output.sections import (
    DESCRIPTION_PLACEHOLDER,
    render_current_date,
    render_error,
    render_hero,
    render_latest,
    render_tech,
)

from .conftest import DEFAULT_IMAGE, NOW, make_record


def articles(count, **kwargs):
    return [Article.from_api(make_record(i, **kwargs)) for i in range(count)]


def soup_of(page, element_id):
    return BeautifulSoup(page.inner_html(element_id), "html.parser")


class TestRenderHero:
    def test_featured_and_side_stories_in_order(self, page):
        assert render_hero(page, articles(6), default_image=DEFAULT_IMAGE)

        hero = soup_of(page, "hero-container")
        main = hero.select_one("article.main-article")
        assert main.h2.a.get_text() == "Headline number 0"
        assert main.h2.a["target"] == "_blank"
        assert main.select_one("p.article-excerpt").get_text() == "Description 0"
        assert main.select_one("a.read-more")["href"] == "https://news.example.com/story-0"

        side_titles = [a.get_text() for a in hero.select("aside.side-articles article.side-article h3 a")]
        assert side_titles == ["Headline number 1", "Headline number 2", "Headline number 3"]

    def test_fewer_than_four_leaves_container_unchanged(self, page):
        before = page.inner_html("hero-container")
        assert not render_hero(page, articles(3), default_image=DEFAULT_IMAGE)
        assert page.inner_html("hero-container") == before

    def test_missing_description_uses_placeholder(self, page):
        render_hero(page, articles(4, description=False), default_image=DEFAULT_IMAGE)
        hero = soup_of(page, "hero-container")
        assert hero.select_one("p.article-excerpt").get_text() == DESCRIPTION_PLACEHOLDER

    def test_missing_image_uses_default(self, page):
        render_hero(page, articles(4, image=False), default_image=DEFAULT_IMAGE)
        srcs = [img["src"] for img in soup_of(page, "hero-container").find_all("img")]
        assert srcs == [DEFAULT_IMAGE] * 4

    def test_text_is_escaped(self, page):
        arts = articles(4)
        arts[0].title = "<script>alert(1)</script>"
        render_hero(page, arts, default_image=DEFAULT_IMAGE)
        hero = soup_of(page, "hero-container")
        assert hero.find("script") is None
        assert hero.select_one("article.main-article h2 a").get_text() == "<script>alert(1)</script>"


class TestRenderLatest:
    def test_cards_show_source_and_relative_time(self, page):
        render_latest(page, articles(2), default_image=DEFAULT_IMAGE, now=NOW)
        cards = soup_of(page, "latest-news-grid").select("article.news-card")
        assert len(cards) == 2
        spans = [s.get_text() for s in cards[0].select(".article-meta span")]
        assert spans == ["Source 0", "2h ago"]

    def test_title_truncated_to_sixty(self, page):
        arts = articles(1)
        arts[0].title = "A" * 80
        render_latest(page, arts, default_image=DEFAULT_IMAGE, now=NOW)
        title = soup_of(page, "latest-news-grid").select_one("h3.article-title a").get_text()
        assert title == "A" * 59 + ELLIPSIS

    def test_none_is_a_no_op(self, page):
        assert not render_latest(page, None, default_image=DEFAULT_IMAGE)
        assert page.inner_html("latest-news-grid") == "<p>stale latest</p>"

    def test_empty_list_renders_empty_grid(self, page):
        assert render_latest(page, [], default_image=DEFAULT_IMAGE)
        assert page.inner_html("latest-news-grid") == ""

    def test_missing_image_uses_default(self, page):
        render_latest(page, articles(3, image=False), default_image=DEFAULT_IMAGE, now=NOW)
        srcs = [img["src"] for img in soup_of(page, "latest-news-grid").find_all("img")]
        assert srcs == [DEFAULT_IMAGE] * 3


class TestRenderTech:
    def test_fixed_label_and_truncation(self, page):
        arts = articles(3)
        arts[1].title = "B" * 70
        render_tech(page, arts, default_image=DEFAULT_IMAGE)
        cards = soup_of(page, "tech-grid").select("article.tech-card")
        assert len(cards) == 3
        assert {c.select_one("span.category").get_text() for c in cards} == {"Technology"}
        assert cards[1].select_one("h3 a").get_text() == "B" * 49 + ELLIPSIS
        assert cards[0].img["alt"] == "Tech News"

    def test_missing_image_uses_default(self, page):
        render_tech(page, articles(3, image=False), default_image=DEFAULT_IMAGE)
        srcs = [img["src"] for img in soup_of(page, "tech-grid").find_all("img")]
        assert srcs == [DEFAULT_IMAGE] * 3

    def test_none_is_a_no_op(self, page):
        assert not render_tech(page, None, default_image=DEFAULT_IMAGE)
        assert page.inner_html("tech-grid") == "<p>stale tech</p>"


def test_render_error_only_touches_hero(page):
    render_error(page)
    hero = soup_of(page, "hero-container")
    assert "Content could not be loaded" in hero.select_one("div.error-msg h3").get_text()
    assert "file://" in hero.get_text()
    assert page.inner_html("latest-news-grid") == "<p>stale latest</p>"
    assert page.inner_html("tech-grid") == "<p>stale tech</p>"


def test_render_current_date(page):
    render_current_date(page, NOW.replace(tzinfo=None))
    assert page.inner_html("current-date") == "Saturday, October 17, 2026"


def test_missing_timestamp_renders_placeholder_labels(page):
    arts = articles(4)
    for art in arts:
        art.published_at = None
    render_hero(page, arts, default_image=DEFAULT_IMAGE)
    render_latest(page, arts, default_image=DEFAULT_IMAGE, now=NOW)

    main = soup_of(page, "hero-container").select_one("article.main-article")
    assert main.select(".article-meta span")[1].get_text() == "Invalid Date"
    card = soup_of(page, "latest-news-grid").select_one("article.news-card")
    assert card.select(".article-meta span")[1].get_text() == ""
