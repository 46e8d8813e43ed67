import sys
from pathlib import Path

import pytest

# Ensure serpscrape and main.py are importable without an install
project_root_tests = Path(__file__).resolve().parent.parent
if str(project_root_tests) not in sys.path:
    sys.path.insert(0, str(project_root_tests))

from serpscrape.logger import define_log_level

# Configure logging for tests
define_log_level(print_level="DEBUG", logfile_level="DEBUG", name="serpscrape_test")

RESULT_PAGE = """
<html><body>
<div id="main">
  <div class="g">
    <a href="/url?q=https%3A%2F%2Fexample.com%2Fpage&amp;sa=U&amp;ved=2ahUKEwi"><h3>Example Page</h3></a>
    <div class="VwiC3b">  An example snippet.  </div>
  </div>
  <div class="ezO2md">
    <a href="https://www.python.org/"><span class="CVA68e">Welcome to Python.org</span></a>
    <span class="FrIlee">The official home of the Python Programming Language</span>
  </div>
  <div class="MjjYud"><a href="#footer"><h3>Skip to footer</h3></a></div>
  <div class="g"><a href="/preferences?hl=en"><h3>Search settings</h3></a></div>
  <div class="g"><a href="https://nosnippet.example.org/"><h3>  No snippet here  </h3></a></div>
  <div class="g"><h3>Heading without link</h3><div class="VwiC3b">orphan</div></div>
  <div class="g"><a href="https://notitle.example.org/">Link without heading</a></div>
</div>
</body></html>
"""

@pytest.fixture
def result_page() -> str:
    return RESULT_PAGE

@pytest.fixture
def page_factory():
    """Builds a result page with `count` distinct desktop-layout blocks."""
    def make_page(count: int) -> str:
        blocks = "".join(
            f'<div class="g"><a href="https://site{i}.example.com/"><h3>Result {i}</h3></a>'
            f'<div class="VwiC3b">Snippet {i}</div></div>'
            for i in range(count)
        )
        return f"<html><body>{blocks}</body></html>"
    return make_page
