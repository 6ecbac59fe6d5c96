"""
Demo Selector Extraction
========================

This script demonstrates extraction from HTML and JSON with XPath-like
selectors, the CSS to XPath fallback and typed access to the results.
"""
import asyncio
import logging
import tempfile
from pathlib import Path

from data_extractor import (
    ExtractionResult,
    JsonDataExtractor,
    PathDataExtractor,
    XmlDataExtractor,
)

logging.basicConfig(level=logging.INFO)


# Sample HTML
HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Cowboy Bebop</title>
    <script type="application/ld+json">{"@type": "TVSeries", "name": "Cowboy Bebop"}</script>
</head>
<body>
    <h1 class="title">Cowboy Bebop</h1>
    <div class="info">
        <span itemprop="genre">Action</span>
        <span itemprop="genre">Space Western</span>
    </div>
    <table id="eplist">
        <tbody>
            <tr><td class="label">Episodes</td><td>26</td></tr>
            <tr><td class="label">Score</td><td>8.75</td></tr>
        </tbody>
    </table>
    <div class="related">
        <h3>Sequel</h3>
        <a href="/anime/5">Cowboy Bebop: The Movie</a>
    </div>
</body>
</html>
"""

JSON = '{"data": {"title": "Cowboy Bebop", "episodes": 26, "genres": ["Action", "Space Western"]}}'


def print_result(title: str, result: ExtractionResult):
    print("=" * 70)
    print(title)
    print("=" * 70)
    print(f"{result}\n")


def demo_html():
    """Demo 1: HTML with the CSS strategy"""
    result = XmlDataExtractor().extract(
        HTML,
        {
            "title": "//h1[@class='title']/text()",
            "genres": "//span[@itemprop='genre']/text()",
            "episodes": "//td[contains(text(), 'Episodes')]/following-sibling::td/text()",
            "sequel": "//h3[contains(text(), 'Sequel')]/../a/@href",
            "synonyms": "//div[@class='synonyms']/text()",
        },
    )
    print_result("DEMO 1: HTML", result)

    print(f"Episodes as int: {result.get_int('episodes')}")
    print(f"Synonyms or default: {result.get_str_or_default('synonyms', 'none')}\n")


def demo_fallback():
    """Demo 2: a selector the CSS engine can't evaluate sends the batch to XPath"""
    result = XmlDataExtractor().extract(HTML, {"json_ld": "node()", "title": "//title/text()"})
    print_result("DEMO 2: CSS to XPath Fallback", result)


def demo_json():
    """Demo 3: JSON with JsonPath"""
    result = JsonDataExtractor().extract(
        JSON,
        {
            "title": "$.data.title",
            "episodes": "$.data.episodes",
            "genres": "$.data.genres",
            "studio": "$.data.studio",
        },
    )
    print_result("DEMO 3: JSON", result)
    print(f"Genres: {result.get_list('genres', str)}\n")


async def demo_directory():
    """Demo 4: every .html file of a directory"""
    with tempfile.TemporaryDirectory() as directory:
        for number in range(1, 4):
            Path(directory, f"page-{number}.html").write_text(HTML.replace("26", str(number)), encoding="utf-8")

        extractor = PathDataExtractor(XmlDataExtractor(), ".html")
        results = await extractor.extract(directory, {"episodes": "//td[@class='label']/following-sibling::td/text()"})

    print("=" * 70)
    print("DEMO 4: Directory")
    print("=" * 70)
    for result in results:
        print(result.get_list("episodes"))
    print()


def main():
    """Run all demos"""
    demo_html()
    demo_fallback()
    demo_json()
    asyncio.run(demo_directory())


if __name__ == "__main__":
    main()
