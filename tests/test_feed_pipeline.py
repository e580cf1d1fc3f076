from fakes import FakeSquareClient, item, variation

from winefeed.pipelines.feed import FeedPipeline
from winefeed.schemas import FEED_HEADER

HEADER = "SKU|name|description|vintage|unit-size|price|stock|url|min-order|tax|offer-type|delivery-time|LWIN|imageurl"
SEARCH_BASE = "https://www.magazzinonyc.com/s/shop?query="


def read_lines(path):
    return path.read_text(encoding="utf-8").split("\n")


def test_header_literal():
    assert FEED_HEADER == HEADER


def test_single_row_end_to_end(config):
    client = FakeSquareClient(
        catalog={
            "objects": [variation("V1", "I1", sku="ABC123", name="Regular", amount=2500)],
            "related_objects": [item("I1", "Chateau Test")],
        },
        inventory={"counts": [{"catalog_object_id": "V1", "quantity": "7"}]},
    )

    written = FeedPipeline(config, client=client).run()

    assert written == 1
    assert client.inventory_requests == [(["V1"], "LOC1")]
    assert read_lines(config.output_file) == [
        HEADER,
        f"ABC123|Chateau Test||NV|750ml|25.00|7|{SEARCH_BASE}Chateau%20Test||Inc.tax|R|Next day||",
        "",
    ]


def test_stock_defaults_to_zero(config):
    client = FakeSquareClient(
        catalog={
            "objects": [
                variation("V1", "I1", sku="A", amount=1000),
                variation("V2", "I1", sku="B", name="Magnum", amount=9000),
                variation("V3", "I1", name="No Sku", amount=100),
            ],
            "related_objects": [item("I1", "Barolo 2015 Riserva")],
        },
        inventory={"counts": [{"catalog_object_id": "V2", "quantity": "0"}]},
    )

    FeedPipeline(config, client=client).run()

    lines = read_lines(config.output_file)
    assert len(lines) == 4
    first = lines[1].split("|")
    second = lines[2].split("|")
    assert len(first) == 14
    assert first[0] == "A" and first[6] == "0"
    assert second[0] == "B" and second[6] == "0"
    assert second[1] == "Barolo 2015 Riserva Magnum"
    assert second[3] == "2015"
    assert second[4] == "1.5L Magnum"
    assert client.inventory_requests == [(["V1", "V2"], "LOC1")]


def test_empty_catalog_writes_header_only(config):
    client = FakeSquareClient(catalog={"objects": []}, inventory={})

    written = FeedPipeline(config, client=client).run()

    assert written == 0
    assert client.inventory_requests == [([], "LOC1")]
    assert config.output_file.read_text(encoding="utf-8") == HEADER + "\n"


def test_runs_are_byte_identical(config):
    client = FakeSquareClient(
        catalog={
            "objects": [
                variation("V1", "I1", sku="A", name="375ml", amount=1999),
                variation("V2", "I2", sku="B", amount=4599),
            ],
            "related_objects": [item("I1", "Sauternes 2009"), item("I2", "Côtes du Rhône")],
        },
        inventory={"counts": [{"catalog_object_id": "V1", "quantity": "3"}]},
    )

    FeedPipeline(config, client=client).run()
    first = config.output_file.read_bytes()
    FeedPipeline(config, client=client).run()

    assert config.output_file.read_bytes() == first
    data_lines = read_lines(config.output_file)[1:-1]
    assert len(data_lines) == 2
    assert all(len(line.split("|")) == 14 for line in data_lines)


def test_names_are_written_verbatim(config):
    # No escaping: a pipe inside a name shifts the columns of that line.
    client = FakeSquareClient(
        catalog={
            "objects": [variation("V1", "I1", sku="A", name="x 2015")],
            "related_objects": [item("I1", "Vin|")],
        },
        inventory={},
    )

    FeedPipeline(config, client=client).run()

    line = read_lines(config.output_file)[1]
    assert line.startswith("A|Vin| x 2015||2015|")
    assert len(line.split("|")) == 15


def test_existing_file_is_overwritten(config):
    config.output_file.write_text("stale content\nmore\n", encoding="utf-8")
    client = FakeSquareClient(catalog={}, inventory={})

    FeedPipeline(config, client=client).run()

    assert config.output_file.read_text(encoding="utf-8") == HEADER + "\n"
