"""
Unit tests for irs990_ux.adapters

Filesystem cache, index scanner, IRS fetcher, CSV writer and field spec
loader, each in isolation.
"""
import csv
import json

import httpx
import pytest

from irs990_ux.adapters import CsvIndexScanner, CsvReportWriter, FilesystemCache, IRSAdapter, load_field_spec
from irs990_ux.core.domain import DocumentRef
from irs990_ux.core.errors import CacheDirectoryError, FetchError, FieldSpecError, IndexCacheError

from conftest import index_row


class TestFilesystemCache:
    """Test FilesystemCache class."""

    def test_init(self, tmp_path):
        cache = FilesystemCache(str(tmp_path))
        assert cache.cache_dir == tmp_path

    def test_init_missing_dir(self, tmp_path):
        with pytest.raises(CacheDirectoryError, match="not a valid directory"):
            FilesystemCache(tmp_path / "missing")

    def test_return_path(self, tmp_path):
        cache = FilesystemCache(tmp_path)
        path = cache.get_return_path("043594598", "201533189349300408")
        assert path == tmp_path / "043594598" / "201533189349300408_public.xml"

    def test_get_return_not_cached(self, tmp_path):
        cache = FilesystemCache(tmp_path)
        assert cache.get_return("043594598", "OBJ1") is None

    def test_save_return_creates_ein_dir(self, tmp_path):
        cache = FilesystemCache(tmp_path)
        path = cache.save_return("043594598", "OBJ1", b"<Return/>")

        assert path.read_bytes() == b"<Return/>"
        assert cache.get_return("043594598", "OBJ1") == path

    def test_index_round_trip(self, tmp_path):
        cache = FilesystemCache(tmp_path)
        refs = [DocumentRef("OBJ1", "TestOrg"), DocumentRef("OBJ2", "TestOrg Inc")]

        path = cache.save_index("123456789", refs)

        assert path == tmp_path / "123456789.json"
        assert json.loads(path.read_text()) == [["OBJ1", "TestOrg"], ["OBJ2", "TestOrg Inc"]]
        assert cache.get_index("123456789") == refs

    def test_get_index_missing(self, tmp_path):
        assert FilesystemCache(tmp_path).get_index("123456789") is None

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", "[[\"OBJ1\"]]"])
    def test_get_index_corrupt(self, tmp_path, content):
        path = tmp_path / "123456789.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(IndexCacheError) as exc_info:
            FilesystemCache(tmp_path).get_index("123456789")

        assert exc_info.value.path == path
        assert "123456789.json" in str(exc_info.value)
        assert "delete it" in str(exc_info.value)

    def test_list_cached_eins(self, tmp_path):
        cache = FilesystemCache(tmp_path)
        cache.save_index("200097189", [DocumentRef("OBJ2", "Mozilla")])
        cache.save_index("043594598", [DocumentRef("OBJ1", "Python")])
        (tmp_path / "fields.json").write_text("{}")

        assert cache.list_cached_eins() == ["043594598", "200097189"]

    def test_list_returns(self, tmp_path):
        cache = FilesystemCache(tmp_path)
        cache.save_return("043594598", "OBJ2", b"<Return/>")
        cache.save_return("043594598", "OBJ1", b"<Return/>")

        assert [p.name for p in cache.list_returns("043594598")] == ["OBJ1_public.xml", "OBJ2_public.xml"]
        assert cache.list_returns("999999999") == []


class TestCsvIndexScanner:
    """Test CsvIndexScanner class."""

    def test_scan_single_match(self, tmp_path, write_index):
        write_index([
            index_row("123456789", "OBJ1", "TestOrg"),
            index_row("987654321", "OBJ9", "Other"),
        ])

        refs = list(CsvIndexScanner(tmp_path).scan("123456789"))

        assert refs == [DocumentRef("OBJ1", "TestOrg")]

    def test_scan_keeps_leading_zeros(self, tmp_path, write_index):
        write_index([index_row("043594598", "201533189349300408", "PYTHON SOFTWARE FOUNDATION")])

        refs = list(CsvIndexScanner(tmp_path).scan("043594598"))

        assert refs == [DocumentRef("201533189349300408", "PYTHON SOFTWARE FOUNDATION")]

    def test_scan_multiple_files_in_name_order(self, tmp_path, write_index):
        write_index([index_row("123456789", "OBJ2016", "TestOrg")], year=2016)
        write_index([index_row("123456789", "OBJ2014", "TestOrg")], year=2014)
        write_index([index_row("123456789", "OBJ2015", "TestOrg")], year=2015)

        refs = list(CsvIndexScanner(tmp_path).scan("123456789"))

        assert [r.object_id for r in refs] == ["OBJ2014", "OBJ2015", "OBJ2016"]

    def test_scan_no_dedup(self, tmp_path, write_index):
        write_index([
            index_row("123456789", "OBJ1", "TestOrg"),
            index_row("123456789", "OBJ1", "TestOrg"),
        ])

        assert len(list(CsvIndexScanner(tmp_path).scan("123456789"))) == 2

    def test_ignores_files_outside_pattern(self, tmp_path, write_index):
        write_index([index_row("123456789", "OBJ1", "TestOrg")], year=2020)

        assert list(CsvIndexScanner(tmp_path).scan("123456789")) == []

    def test_skips_malformed_rows(self, tmp_path, write_index):
        write_index([
            "R1,EFILE,123456789\n",
            "R2,EFILE,123456789,201512,2016-05-01,TestOrg,990,934931,OBJ2,EXTRA,FIELDS\n",
            index_row("123456789", "OBJ3", "TestOrg"),
        ])

        refs = list(CsvIndexScanner(tmp_path).scan("123456789"))

        assert refs == [DocumentRef("OBJ3", "TestOrg")]

    def test_skips_file_without_required_columns(self, tmp_path, write_index):
        write_index(["123456789,OBJ1\n"], year=2015, header="EIN,OBJECT_ID\n")
        write_index([index_row("123456789", "OBJ2", "TestOrg")], year=2016)

        refs = list(CsvIndexScanner(tmp_path).scan("123456789"))

        assert refs == [DocumentRef("OBJ2", "TestOrg")]

    def test_skips_empty_file(self, tmp_path):
        (tmp_path / "index_2017.csv").write_text("")

        assert list(CsvIndexScanner(tmp_path).scan("123456789")) == []

    def test_quoted_names(self, tmp_path, write_index):
        write_index(['1,EFILE,123456789,201512,2016-05-01,"TEST ORG, INC",990,934931,OBJ1\n'])

        refs = list(CsvIndexScanner(tmp_path).scan("123456789"))

        assert refs == [DocumentRef("OBJ1", "TEST ORG, INC")]

    def test_small_chunks(self, tmp_path, write_index):
        rows = [index_row("111111111", f"X{i}", "Filler") for i in range(25)]
        rows.insert(13, index_row("123456789", "OBJ1", "TestOrg"))
        write_index(rows)

        refs = list(CsvIndexScanner(tmp_path, chunksize=5).scan("123456789"))

        assert refs == [DocumentRef("OBJ1", "TestOrg")]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(CacheDirectoryError):
            list(CsvIndexScanner(tmp_path / "missing").scan("123456789"))


class TestIRSAdapter:
    """Test IRSAdapter class."""

    def test_url(self):
        adapter = IRSAdapter()
        assert adapter.url_for("201533189349300408") == (
            "https://s3.amazonaws.com/irs-form-990/201533189349300408_public.xml"
        )

    def test_fetch_success(self, fake_irs):
        fake_irs.returns["OBJ1"] = "<Return/>"
        adapter = IRSAdapter(client=fake_irs.client())

        assert adapter.fetch("OBJ1") == b"<Return/>"
        assert len(fake_irs.requests) == 1
        assert fake_irs.requests[0].method == "GET"
        assert fake_irs.requests[0].url.scheme == "https"

    def test_fetch_not_found(self, fake_irs):
        adapter = IRSAdapter(client=fake_irs.client())

        with pytest.raises(FetchError) as exc_info:
            adapter.fetch("OBJ404")

        assert exc_info.value.object_id == "OBJ404"
        assert exc_info.value.status_code == 404
        assert "OBJ404" in str(exc_info.value)

    def test_fetch_server_error(self, fake_irs):
        fake_irs.status_code = 503
        adapter = IRSAdapter(client=fake_irs.client())

        with pytest.raises(FetchError, match="503"):
            adapter.fetch("OBJ1")

    def test_fetch_transport_error(self):
        def boom(request):
            raise httpx.ConnectError("connection refused", request=request)

        adapter = IRSAdapter(client=httpx.Client(transport=httpx.MockTransport(boom)))

        with pytest.raises(FetchError, match="ConnectError") as exc_info:
            adapter.fetch("OBJ1")

        assert exc_info.value.status_code is None

    def test_close(self, fake_irs):
        adapter = IRSAdapter(client=fake_irs.client())
        adapter.close()
        assert adapter._client is None


class TestCsvReportWriter:
    """Test CsvReportWriter class."""

    def test_write(self, tmp_path):
        path = CsvReportWriter().write(
            ["EIN", "Mission"],
            [["123456789", "Help, and more\nhelp"], ["043594598", None]],
            tmp_path / "out.csv"
        )

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))

        assert rows == [
            ["EIN", "Mission"],
            ["123456789", "Help, and more\nhelp"],
            ["043594598", ""],
        ]

    def test_values_written_verbatim(self, tmp_path):
        path = CsvReportWriter().write(["EIN", "Amt"], [["043594598", "0100"]], tmp_path / "out.csv")

        assert path.read_text(encoding="utf-8") == "EIN,Amt\n043594598,0100\n"


class TestLoadFieldSpec:
    """Test load_field_spec function."""

    def test_load(self, tmp_path):
        path = tmp_path / "fields.json"
        path.write_text(json.dumps({
            "/Return/ReturnData/IRS990/MissionDesc | /Return/ReturnData/IRS990/ActivityOrMissionDescription": "Mission",
            "/Return/ReturnData/IRS990/TotalEmployeeCnt": "Num of employees",
        }))

        spec = load_field_spec(path)

        assert spec.columns == ["Mission", "Num of employees"]
        assert len(spec.fields[0].alternatives) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(FieldSpecError, match="Cannot read"):
            load_field_spec(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "fields.json"
        path.write_text("{not json")
        with pytest.raises(FieldSpecError, match="Invalid JSON"):
            load_field_spec(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "fields.json"
        path.write_text('["/Return/ReturnHeader/Filer/EIN"]')
        with pytest.raises(FieldSpecError, match="JSON object"):
            load_field_spec(path)

    def test_blank_xpath(self, tmp_path):
        path = tmp_path / "fields.json"
        path.write_text('{" | ": "Nothing"}')
        with pytest.raises(FieldSpecError, match="Nothing"):
            load_field_spec(path)
