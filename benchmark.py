#!/usr/bin/env python3
"""
Performance benchmark for htmlast against other HTML parsers.

Documents are generated from a fixed template so the run needs no dataset
on disk. Comparison parsers are optional: install them with
``pip install htmlast[benchmark]``.
"""

# ruff: noqa: PLC0415, BLE001
from __future__ import annotations

import argparse
import random
import time

from htmlast import parse

ROW_TEMPLATE = '<tr><td class="name">{name}<td>{count}<td><a href="/item/{count}">view</a></tr>'
SECTION_TEMPLATE = """
<section id="s{index}">
  <h2>Section {index}</h2>
  <p>Intro paragraph for section {index}<p>Second paragraph with <b>bold</b> and <i>italic</i> text.
  <ul>
    <li>first item
    <li>second item
    <li><input type="checkbox" checked> third item
  </ul>
  <table>
    {rows}
  </table>
</section>
"""


def generate_documents(count: int, sections: int, seed: int = 0) -> list:
    """Build count documents of the given size, deterministically."""
    rng = random.Random(seed)
    documents = []
    for doc_index in range(count):
        body = []
        for index in range(sections):
            rows = "\n    ".join(
                ROW_TEMPLATE.format(name=f"row-{rng.randint(0, 9999)}", count=rng.randint(0, 999))
                for _ in range(rng.randint(3, 12))
            )
            body.append(SECTION_TEMPLATE.format(index=index, rows=rows))
        html = (
            "<!DOCTYPE html>\n<!-- generated -->\n"
            f'<html lang="en"><head><title>Doc {doc_index}</title>'
            '<meta charset="utf-8"></head>'
            f"<body>{''.join(body)}</body></html>"
        )
        documents.append((f"doc-{doc_index}.html", html))
    return documents


def _time_parser(parse_fn, html_files: list, iterations: int) -> dict:
    all_times = []
    errors = 0
    error_files = []
    if html_files:
        # Warm-up
        try:
            parse_fn(html_files[0][1])
        except Exception:
            pass
    for _ in range(iterations):
        for filename, html in html_files:
            try:
                start = time.perf_counter()
                result = parse_fn(html)
                elapsed = time.perf_counter() - start
                all_times.append(elapsed)
                _ = result
            except Exception as e:
                errors += 1
                error_files.append((filename, str(e)))
    return {
        "total_time": sum(all_times),
        "mean_time": sum(all_times) / len(all_times) if all_times else 0,
        "min_time": min(all_times) if all_times else 0,
        "max_time": max(all_times) if all_times else 0,
        "errors": errors,
        "error_files": error_files,
        "success_count": len(all_times),
    }


def benchmark_htmlast(html_files: list, iterations: int = 1) -> dict:
    """Benchmark htmlast."""
    return _time_parser(parse, html_files, iterations)


def benchmark_html5lib(html_files: list, iterations: int = 1) -> dict:
    """Benchmark html5lib parser."""
    try:
        import html5lib
    except ImportError:
        return {"error": "html5lib not installed (pip install html5lib)"}
    return _time_parser(html5lib.parse, html_files, iterations)


def benchmark_lxml(html_files: list, iterations: int = 1) -> dict:
    """Benchmark lxml parser."""
    try:
        from lxml import html as lxml_html
    except ImportError:
        return {"error": "lxml not installed (pip install lxml)"}
    return _time_parser(lxml_html.fromstring, html_files, iterations)


def benchmark_bs4(html_files: list, iterations: int = 1) -> dict:
    """Benchmark BeautifulSoup4 parser."""
    try:
        from bs4 import BeautifulSoup
    except ImportError:
        return {"error": "bs4 not installed (pip install beautifulsoup4)"}
    return _time_parser(lambda html: BeautifulSoup(html, "html.parser"), html_files, iterations)


BENCHMARKS = {
    "htmlast": benchmark_htmlast,
    "html5lib": benchmark_html5lib,
    "lxml": benchmark_lxml,
    "bs4": benchmark_bs4,
}


def print_results(results: dict, file_count: int, iterations: int = 1):
    """Pretty print benchmark results."""
    print("\n" + "=" * 70)
    if iterations > 1:
        print(f"BENCHMARK RESULTS ({file_count} HTML files x {iterations} iterations)")
    else:
        print(f"BENCHMARK RESULTS ({file_count} HTML files)")
    print("=" * 70)

    print(f"\n{'Parser':<15} {'Total (s)':<10} {'Mean (ms)':<10} {'Errors':<8}")
    print("-" * 70)

    baseline = results.get("htmlast", {}).get("total_time", 0)
    for parser, result in results.items():
        if "error" in result:
            print(f"{parser:<15} {result['error']}")
            continue
        total = result["total_time"]
        mean_ms = result["mean_time"] * 1000
        speedup = ""
        if parser != "htmlast" and baseline > 0 and total > 0:
            speedup = f" ({total / baseline:.2f}x)"
        print(f"{parser:<15} {total:<10.3f} {mean_ms:<10.3f} {result['errors']:<8}{speedup}")

    for parser, result in results.items():
        error_files = result.get("error_files", [])
        if error_files:
            print(f"\nErrors for {parser}:")
            for filename, error_msg in error_files:
                print(f"  {filename}: {error_msg}")
    print()


def main():
    parser = argparse.ArgumentParser(description="Benchmark htmlast against other HTML parsers")
    parser.add_argument("--files", type=int, default=50, help="Number of generated documents")
    parser.add_argument("--sections", type=int, default=20, help="Sections per document")
    parser.add_argument("--iterations", type=int, default=3, help="Passes over the document set")
    parser.add_argument(
        "--parsers",
        nargs="+",
        choices=list(BENCHMARKS),
        default=list(BENCHMARKS),
        help="Parsers to benchmark",
    )
    args = parser.parse_args()

    html_files = generate_documents(args.files, args.sections)
    results = {}
    for name in args.parsers:
        print(f"Benchmarking {name}...")
        results[name] = BENCHMARKS[name](html_files, args.iterations)
    print_results(results, len(html_files), args.iterations)


if __name__ == "__main__":
    main()
