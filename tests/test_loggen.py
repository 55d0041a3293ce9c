import loggen
from trafficlogs.ingest import parse_path


def test_generators_are_deterministic():
    for generate in loggen.GENERATORS.values():
        assert generate(10, seed=3) == generate(10, seed=3)
        assert generate(10, seed=3) != generate(10, seed=4)


def test_write_samples(tmp_path, capsys):
    loggen.write_samples(tmp_path, count=12)

    for fmt, ext in loggen.EXTENSIONS.items():
        path = tmp_path / f"{fmt.lower()}_sample.{ext}"
        data = parse_path(fmt, path)
        assert len(data.logs) + len(data.passage) + len(data.ivdc) == 12

    assert "Generated 12 IVDC records" in capsys.readouterr().out
