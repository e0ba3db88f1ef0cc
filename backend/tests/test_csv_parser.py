from app.services.csv_parser import parse_csv, split_fields

HEADER = "name,unit,category,brand,stock,status,image"


def test_headers_are_trimmed_and_unquoted():
    parsed = parse_csv('"name", unit ,"category"\n')
    assert parsed.headers == ["name", "unit", "category"]
    assert parsed.rows == []


def test_blank_lines_and_trailing_newline_are_dropped():
    text = HEADER + "\n\n" + '"A","pcs","C","B",1,"",""\n' + "   \n"
    parsed = parse_csv(text)
    assert len(parsed.rows) == 1
    assert parsed.rows[0]["name"] == "A"


def test_quoted_field_may_contain_commas():
    parsed = parse_csv(HEADER + '\n"Screwdriver Set, 6 piece","box","Tools","Bosch",7,"",""')
    row = parsed.rows[0]
    assert row["name"] == "Screwdriver Set, 6 piece"
    assert row["unit"] == "box"
    assert row["stock"] == "7"
    assert row["image"] == ""


def test_missing_cells_become_empty_strings():
    parsed = parse_csv(HEADER + "\nHammer,pcs")
    row = parsed.rows[0]
    assert row["name"] == "Hammer"
    assert row["unit"] == "pcs"
    assert row["category"] == ""
    assert row["image"] == ""
    assert set(row) == set(HEADER.split(","))


def test_extra_cells_are_ignored():
    parsed = parse_csv("name,stock\nHammer,3,extra,more")
    assert parsed.rows[0] == {"name": "Hammer", "stock": "3"}


def test_cells_are_trimmed_around_quotes():
    assert split_fields('  "Widget" , "pcs "') == ["Widget", "pcs"]


def test_bare_commas_do_not_produce_fields():
    # restricted grammar: values after an empty unquoted cell shift left
    parsed = parse_csv("name,unit,category\nHammer,,Tools")
    assert parsed.rows[0] == {"name": "Hammer", "unit": "Tools", "category": ""}


def test_empty_quoted_field_counts_as_a_field():
    parsed = parse_csv('name,unit,category\n"Hammer","","Tools"')
    assert parsed.rows[0] == {"name": "Hammer", "unit": "", "category": "Tools"}


def test_crlf_line_endings():
    parsed = parse_csv('name,stock\r\n"Hammer",4\r\n')
    assert parsed.headers == ["name", "stock"]
    assert parsed.rows == [{"name": "Hammer", "stock": "4"}]


def test_empty_input():
    parsed = parse_csv("")
    assert parsed.headers == []
    assert parsed.rows == []


def test_doubled_quotes_are_not_an_escape():
    # only the outer quotes go; the inner pair stays as written
    parsed = parse_csv('name,unit\n"Say ""hi""",pcs')
    assert parsed.rows[0] == {"name": 'Say ""hi', "unit": "pcs"}
