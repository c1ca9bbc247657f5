from utils.popups import endorser_popup_html, gdp_popup_html


def test_gdp_popup():
    html = gdp_popup_html({'name': 'Chile', 'GDP': 335_533_000_000})
    assert html == '<strong>Country:</strong> Chile<br><strong>GDP:</strong> $335533000000'


def test_endorser_popup():
    html = endorser_popup_html({'Name': 'Acme', 'Website': 'https://acme.example'})
    assert '<strong>Name:</strong> Acme' in html
    assert '<a href="https://acme.example" target="_blank">https://acme.example</a>' in html


def test_missing_values_render_empty():
    assert gdp_popup_html(None).endswith('<strong>GDP:</strong> $')
    assert '<strong>Name:</strong> <br>' in endorser_popup_html({'Name': None})


def test_values_are_escaped():
    html = endorser_popup_html({'Name': '<script>x</script>', 'Website': 'a" onclick="b'})
    assert '<script>' not in html
    assert '&lt;script&gt;' in html
    assert 'onclick="b' not in html
