import pytest


SAMPLE_HTML_WITH_YALE = """<!DOCTYPE html>
<html>
<head>
  <title>Yale University Test Page</title>
  <meta name="description" content="Yale University homepage">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="canonical" href="https://www.yale.edu/">
</head>
<body>
  <header>
    <nav>
      <ul>
        <li><a href="https://www.yale.edu/about">About Yale</a></li>
        <li><a href="https://www.yale.edu/admissions">Yale Admissions</a></li>
        <li><a href="https://www.yale.edu/images/yale-logo.png" title="Yale logo">Logo</a></li>
      </ul>
    </nav>
  </header>
  <main>
    <h1>Welcome to Yale University</h1>
    <p>Yale University is a private Ivy League research university in New Haven, Connecticut.</p>
    <p>Founded in 1701, Yale is the third-oldest institution of higher education in the United States.</p>
    <img src="https://www.yale.edu/images/campus.jpg" alt="Yale campus">
    <!-- Yale comment -->
    <p>Contact us at <a href="mailto:info@yale.edu">info@yale.edu</a></p>
  </main>
  <script>var school = "Yale";</script>
</body>
</html>
"""


@pytest.fixture
def sample_html_with_yale():
    return SAMPLE_HTML_WITH_YALE
