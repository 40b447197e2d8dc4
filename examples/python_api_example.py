"""Python API usage examples for docseek."""

from docseek import Config, DocsetSearcher, ResultFormatter, find_docset, list_docsets
from docseek.core.formatter import build_glyph_table
from docseek.core.matcher import CaseMatching, FuzzyMatcher
from docseek.docsets import resolve_docsets_dir


# Example 1: List installed docsets
def example_list_docsets():
    """List docsets in the default location."""
    print("Example 1: Installed Docsets")
    print("=" * 60)

    docsets_dir = resolve_docsets_dir()
    print(f"Docsets directory: {docsets_dir}")

    for name in list_docsets(docsets_dir):
        print(f"  {name}")


# Example 2: Fuzzy search
def example_fuzzy_search():
    """Fuzzy search a docset and inspect candidates."""
    print("\n\nExample 2: Fuzzy Search")
    print("=" * 60)

    docset = find_docset(resolve_docsets_dir(), "Python_3")
    result = DocsetSearcher().search(docset, "opn")

    print(f"Scanned {result.scanned} entries, {len(result)} matched")
    for candidate in result.candidates[:5]:
        print(f"\n{candidate.name} ({candidate.kind})")
        print(f"  Score: {candidate.score}")
        print(f"  Path: {candidate.resolved_path}")


# Example 3: Case-sensitive search without the substring pre-filter
def example_custom_searcher():
    """Search with a custom matcher and full-table scoring."""
    print("\n\nExample 3: Custom Searcher")
    print("=" * 60)

    searcher = DocsetSearcher(
        matcher=FuzzyMatcher(case=CaseMatching.RESPECT),
        prefilter=False,
        max_workers=4,
    )
    docset = find_docset(resolve_docsets_dir(), "Python_3")
    result = searcher.search(docset, "OD")

    for candidate in result.candidates[:5]:
        print(f"  {candidate.score:4d}  {candidate.name}")


# Example 4: Format output lines with glyphs
def example_formatting():
    """Render results the way the CLI does, with custom glyphs."""
    print("\n\nExample 4: Formatting")
    print("=" * 60)

    config = Config()
    config.set("output.glyphs", {"function": {"symbol": "fn", "color": "green"}})

    formatter = ResultFormatter(
        decorate=True,
        glyphs=build_glyph_table(config.get("output.glyphs")),
    )

    docset = find_docset(resolve_docsets_dir(config=config), "Python_3")
    result = DocsetSearcher.from_config(config).search(docset, "")

    for line in formatter.format_all(result)[:10]:
        print(line)


if __name__ == "__main__":
    example_list_docsets()
    example_fuzzy_search()
    example_custom_searcher()
    example_formatting()
