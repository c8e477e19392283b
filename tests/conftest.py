"""
Shared fixtures: synthetic index files, cached returns and a fake IRS server.
"""
import httpx
import pytest

INDEX_HEADER = "RETURN_ID,FILING_TYPE,EIN,TAX_PERIOD,SUB_DATE,TAXPAYER_NAME,RETURN_TYPE,DLN,OBJECT_ID\n"

SIMPLE_RETURN = (
    "<Return><ReturnHeader><Filer><EIN>123456789</EIN></Filer></ReturnHeader></Return>"
)

MODERN_RETURN = """<?xml version="1.0" encoding="utf-8"?>
<Return xmlns="http://www.irs.gov/efile" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
        xsi:schemaLocation="http://www.irs.gov/efile" returnVersion="2015v2.1">
  <ReturnHeader>
    <TaxPeriodEndDt>2015-12-31</TaxPeriodEndDt>
    <TaxYr>2015</TaxYr>
    <Filer>
      <EIN>043594598</EIN>
      <BusinessName>
        <BusinessNameLine1Txt>PYTHON SOFTWARE FOUNDATION</BusinessNameLine1Txt>
      </BusinessName>
    </Filer>
  </ReturnHeader>
  <ReturnData documentCnt="2">
    <IRS990>
      <Organization501c3Ind>X</Organization501c3Ind>
      <GrossReceiptsAmt>3391000</GrossReceiptsAmt>
      <LegalDomicileStateCd>DE</LegalDomicileStateCd>
      <MissionDesc>PROMOTE, PROTECT, AND ADVANCE THE PYTHON PROGRAMMING LANGUAGE</MissionDesc>
      <TotalRevenueGrp>
        <TotalRevenueColumnAmt>3391000</TotalRevenueColumnAmt>
      </TotalRevenueGrp>
    </IRS990>
  </ReturnData>
</Return>
"""

LEGACY_RETURN = """<?xml version="1.0" encoding="utf-8"?>
<Return xmlns="http://www.irs.gov/efile" returnVersion="2011v1.2">
  <ReturnHeader>
    <TaxPeriodEndDate>2011-12-31</TaxPeriodEndDate>
    <TaxYear>2011</TaxYear>
    <Filer>
      <EIN>043594598</EIN>
      <Name>
        <BusinessNameLine1>PYTHON SOFTWARE FOUNDATION</BusinessNameLine1>
      </Name>
    </Filer>
  </ReturnHeader>
  <ReturnData>
    <IRS990>
      <Organization501c typeOf501cOrganization="3">X</Organization501c>
      <GrossReceipts>1700000</GrossReceipts>
      <StateLegalDomicile>DE</StateLegalDomicile>
      <ActivityOrMissionDescription>SUPPORT THE PYTHON COMMUNITY</ActivityOrMissionDescription>
      <TotalRevenue>
        <TotalRevenueColumn>1700000</TotalRevenueColumn>
      </TotalRevenue>
    </IRS990>
  </ReturnData>
</Return>
"""


def index_row(ein: str, object_id: str, name: str, return_id: str = "1") -> str:
    return f"{return_id},EFILE,{ein},201512,2016-05-01,{name},990,93493133000000,{object_id}\n"


@pytest.fixture
def write_index(tmp_path):
    """Write an index_201?.csv file into tmp_path"""
    def _write(rows: list[str], year: int = 2016, header: str = INDEX_HEADER):
        path = tmp_path / f"index_{year}.csv"
        path.write_text(header + "".join(rows), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_return(tmp_path):
    """Put a return into the local cache at <ein>/<object_id>_public.xml"""
    def _write(ein: str, object_id: str, content: str):
        ein_dir = tmp_path / ein
        ein_dir.mkdir(exist_ok=True)
        path = ein_dir / f"{object_id}_public.xml"
        path.write_text(content, encoding="utf-8")
        return path
    return _write


class FakeIRS:
    """httpx transport serving returns by object id and counting requests"""

    def __init__(self, returns: dict[str, str] | None = None, status_code: int = 404):
        self.returns = returns or {}
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        name = request.url.path.rsplit("/", 1)[-1]
        object_id = name.removesuffix("_public.xml")
        if object_id in self.returns:
            return httpx.Response(200, content=self.returns[object_id].encode("utf-8"))
        return httpx.Response(self.status_code)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_irs():
    return FakeIRS()
