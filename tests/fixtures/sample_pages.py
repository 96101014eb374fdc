"""
Sample page fixtures for testing.
"""

# Home page with a known heading and link layout
HOME_PAGE_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <title>Home</title>
</head>
<body>
    <h1>Welcome home</h1>
    <h2>First section</h2>
    <h2>Second section</h2>
    <a href="http://other.test/one">One</a>
    <a href="http://other.test/two">Two</a>
    <a href="http://other.test/three">Three</a>
    <a href="/x">Inside</a>
    <a href="/x">Again</a>
</body>
</html>
"""

# Every head tag the full report looks at
FULL_METADATA_PAGE_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>Acme Widgets | Home</title>
    <meta name="description" content="Hand made widgets shipped worldwide">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <meta name="keywords" content="widgets, acme">
    <meta name="robots" content="index, follow">
    <meta property="og:locale" content="en_US">
    <meta property="og:type" content="website">
    <meta property="og:site_name" content="Acme">
    <meta property="og:image" content="https://example.com/og.png">
    <link rel="canonical" href="/home">
    <link rel="shortcut icon" href="/favicon.ico">
    <link rel="icon" href="/icon.png">
    <link rel="alternate" hreflang="en" href="https://example.com/en/">
    <link rel="alternate" hreflang="de" href="/de/">
    <link rel="alternate" hreflang="de" href="/de/">
</head>
<body>
    <h1>Acme Widgets</h1>
    <p>We make widgets.</p>
</body>
</html>
"""

# No title, empty description, bare keywords tag
SPARSE_PAGE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta name="description" content="">
    <meta name="keywords">
</head>
<body>
    <p>Short content.</p>
</body>
</html>
"""

# Word and anchor statistics: 6 words, 2 of them in anchors
WORDS_PAGE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Words</title>
</head>
<body>
    <p>One two three four</p>
    <a href="/a">  five six  </a>
</body>
</html>
"""

# Images with every combination of missing attributes
IMAGES_PAGE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Gallery</title>
</head>
<body>
    <img src="/a.png" alt="A">
    <img src="/b.png">
    <img alt="no source">
    <img src="" alt="">
</body>
</html>
"""

# Links exercising both classification rules and nofollow
LINKS_PAGE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Links</title>
</head>
<body>
    <a href="/about">About</a>
    <a href="https://example.com/contact">Contact</a>
    <a href="https://partner.test/" rel="nofollow sponsored">Partner</a>
    <a href="mailto:team@example.com">Mail us</a>
    <a name="top">Top</a>
    <map name="m"><area href="/map-target" alt="Map"></map>
</body>
</html>
"""

# Broken markup should still parse
BROKEN_PAGE_HTML = """
<html><head><title>Broken</title>
<body><p>Unclosed paragraph <b>bold <a href='/x'>link
<div><h1>Heading</h2>
"""
