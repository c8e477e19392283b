"""
Default field tables and the FOSS foundation batch.

Read-only mappings built once at import; pass FieldSpec objects built from
them to the services rather than mutating these.
"""
from types import MappingProxyType

from .domain import FieldSpec

# Major US 501(c) FOSS foundations (EIN => short name)
FOSS_FOUNDATIONS = MappingProxyType({
    "470825376": "Apache",
    "460503801": "Linux",
    "412203632": "Conservancy",
    "113390208": "SPI",
    "462060554": "Apereo",
    "200963503": "OWASP",
    "043594598": "Python",
    "270596562": "Sahana",
    "412165986": "SFLC",
    "200097189": "Mozilla",
})

# Fields always reported, ahead of any caller fields
COMMON_FIELDS = MappingProxyType({
    "/Return/ReturnHeader/Filer/EIN": "EIN",
    "/Return/ReturnHeader/TaxYr | /Return/ReturnHeader/TaxYear": "Tax Year",
    "/Return/ReturnHeader/TaxPeriodEndDt | /Return/ReturnHeader/TaxPeriodEndDate": "FY End",
    "/Return/@returnVersion": "Form Version",
    # Business name element moved around 2013
    "/Return/ReturnHeader/Filer/BusinessName/BusinessNameLine1Txt"
    " | /Return/ReturnHeader/Filer/BusinessName/BusinessNameLine1"
    " | /Return/ReturnHeader/Filer/Name/BusinessNameLine1": "Business Name",
    "/Return/ReturnData/IRS990/LegalDomicileStateCd | /Return/ReturnData/IRS990/StateLegalDomicile": "State",
    "/Return/ReturnData/IRS990/GrossReceiptsAmt | /Return/ReturnData/IRS990/GrossReceipts": "Gross Receipts(lineG)",
    "/Return/ReturnData/IRS990/Organization501c3Ind | /Return/ReturnData/IRS990/Organization501c3": "Is a 501(c)(3)?",
    "/Return/ReturnData/IRS990/Organization501cInd/@organization501cTypeTxt"
    " | /Return/ReturnData/IRS990/Organization501c/@typeOf501cOrganization": "Is a 501(c)(_)?",
})

# Default extra fields (override with a field spec file)
DEFAULT_FIELDS = MappingProxyType({
    # IRS990ScheduleA only present if Organization501c3Ind
    "/Return/ReturnData/IRS990ScheduleA/PublicSupportCY170Pct"
    " | /Return/ReturnData/IRS990ScheduleA/PublicSupportPertcentage170": "Public support %, SchA, Pt2",
    "/Return/ReturnData/IRS990ScheduleA/PublicSupportCY509Pct": "Public support %, SchA, Pt3",

    # Fiscal datapoints
    "/Return/ReturnData/IRS990/FederatedCampaignsAmt": "Federated campaigns",
    "/Return/ReturnData/IRS990/MembershipDuesAmt": "Membership Dues",
    "/Return/ReturnData/IRS990/RelatedOrganizationsAmt": "Related org. amt",
    "/Return/ReturnData/IRS990/GovernmentGrantsAmt": "Government grants (contrib)",
    "/Return/ReturnData/IRS990/AllOtherContributionsAmt": "All other contrib not included in above",
    "/Return/ReturnData/IRS990/NoncashContributionsAmt"
    " | /Return/ReturnData/IRS990/DeductibleNonCashContributions": "Noncash contrib",
    "/Return/ReturnData/IRS990/TotalContributionsAmt"
    " | /Return/ReturnData/IRS990/ContributionsGrantsCurrentYear": "Total contrib",
    "/Return/ReturnData/IRS990/TotalProgramServiceRevenueAmt"
    " | /Return/ReturnData/IRS990/ProgramServiceRevenueCY": "Program service revenue (line 2G)",
    "/Return/ReturnData/IRS990/TotalRevenueGrp/TotalRevenueColumnAmt"
    " | /Return/ReturnData/IRS990/TotalRevenue/TotalRevenueColumn": "Total revenue",
    "/Return/ReturnData/IRS990/TotalRevenueGrp/RelatedOrExemptFuncIncomeAmt": "Total related revenue",
    "/Return/ReturnData/IRS990/TotalRevenueGrp/UnrelatedBusinessRevenueAmt": "Total unrelated revenue",
    "/Return/ReturnData/IRS990/TotalRevenueGrp/ExclusionAmt": "Total excluded revenue",
    "/Return/ReturnData/IRS990/TotalFunctionalExpensesGrp/TotalAmt"
    " | /Return/ReturnData/IRS990/TotalExpensesCurrentYear": "Total Func. Expenses",
    "/Return/ReturnData/IRS990/TotalFunctionalExpensesGrp/ProgramServicesAmt"
    " | /Return/ReturnData/IRS990/TotalProgramServiceExpense": "Program Func. Expenses",
    "/Return/ReturnData/IRS990/TotalFunctionalExpensesGrp/ManagementAndGeneralAmt"
    " | /Return/ReturnData/IRS990/OtherExpensesCurrentYear": "Admin Func. Expenses",
    "/Return/ReturnData/IRS990/TotalFunctionalExpensesGrp/FundraisingAmt"
    " | /Return/ReturnData/IRS990/TotalFundrsngExpCurrentYear": "Fundraising Func. Expenses",
    "/Return/ReturnData/IRS990/CYSalariesCompEmpBnftPaidAmt"
    " | /Return/ReturnData/IRS990/SalariesEtcCurrentYear": "Salaries etc expenses",
    "/Return/ReturnData/IRS990/TotalAssetsGrp/BOYAmt | /Return/ReturnData/IRS990/TotalAssetsBOY": "Total assets, start year",
    "/Return/ReturnData/IRS990/TotalAssetsGrp/EOYAmt | /Return/ReturnData/IRS990/TotalAssetsEOY": "Total assets, end year",
    "/Return/ReturnData/IRS990/TotalLiabilitiesGrp/BOYAmt"
    " | /Return/ReturnData/IRS990/TotalLiabilitiesBOY": "Total liabilities, start year",
    "/Return/ReturnData/IRS990/TotalLiabilitiesGrp/EOYAmt"
    " | /Return/ReturnData/IRS990/TotalLiabilitiesEOY": "Total liabilities, end year",
    "/Return/ReturnData/IRS990/TotLiabNetAssetsFundBalanceGrp/BOYAmt"
    " | /Return/ReturnData/IRS990/NetAssetsOrFundBalancesBOY": "Total liabilities and net assets/fund balances, start year",
    "/Return/ReturnData/IRS990/TotLiabNetAssetsFundBalanceGrp/EOYAmt"
    " | /Return/ReturnData/IRS990/NetAssetsOrFundBalancesEOY": "Total liabilities and net assets/fund balances, end year",

    # Governance datapoints
    "/Return/ReturnData/IRS990/MissionDesc | /Return/ReturnData/IRS990/ActivityOrMissionDescription": "Mission",
    # Website availability fields not present pre-2013
    "/Return/ReturnData/IRS990/OwnWebsiteInd": "990 avail on own website",
    "/Return/ReturnData/IRS990/OtherWebsiteInd": "990 avail on other website",
    "/Return/ReturnData/IRS990/UponRequestInd": "990 avail upon request",
    # Only the first accomplishment in the list
    "/Return/ReturnData/IRS990/Desc | /Return/ReturnData/IRS990/Description": "Program Accomplishments",
    "/Return/ReturnData/IRS990/GoverningBodyVotingMembersCnt"
    " | /Return/ReturnData/IRS990/NbrVotingMembersGoverningBody": "Num of voting governing body members",
    "/Return/ReturnData/IRS990/IndependentVotingMemberCnt"
    " | /Return/ReturnData/IRS990/NbrIndependentVotingMembers": "Num of independent voting members",
    "/Return/ReturnData/IRS990/TotalEmployeeCnt | /Return/ReturnData/IRS990/TotalNbrEmployees": "Num of employees",
    "/Return/ReturnData/IRS990/TotalVolunteersCnt | /Return/ReturnData/IRS990/TotalNbrVolunteers": "Num of volunteers",
    "/Return/ReturnData/IRS990/MembersOrStockholdersInd"
    " | /Return/ReturnData/IRS990/MembersOrStockholders": "Org has members or stockholders?",
    "/Return/ReturnData/IRS990/ElectionOfBoardMembersInd"
    " | /Return/ReturnData/IRS990/ElectionOfBoardMembers": "Org has persons who had power to elect or appoint board members?",
    "/Return/ReturnData/IRS990/DecisionsSubjectToApprovaInd"
    " | /Return/ReturnData/IRS990/DecisionsSubjectToApproval": "Governance decisions subject to approval-outside governing body?",
    "/Return/ReturnData/IRS990/MinutesOfGoverningBodyInd"
    " | /Return/ReturnData/IRS990/MinutesOfGoverningBody": "Org documents minutes of governing body?",
    "/Return/ReturnData/IRS990/MinutesOfCommitteesInd"
    " | /Return/ReturnData/IRS990/MinutesOfCommittees": "Org documents commtte minutes?",
    "/Return/ReturnData/IRS990/OfficerMailingAddressInd"
    " | /Return/ReturnData/IRS990/OfficerMailingAddress": "Officers not be reached at mailing address?",
    "/Return/ReturnData/IRS990/Form990ProvidedToGvrnBodyInd"
    " | /Return/ReturnData/IRS990/Form990ProvidedToGoverningBody": "Form 990 provided to governing body?",
    "/Return/ReturnData/IRS990/ConflictOfInterestPolicyInd"
    " | /Return/ReturnData/IRS990/ConflictOfInterestPolicy": "Org COI policy?",
    "/Return/ReturnData/IRS990/AnnualDisclosureCoveredPrsnInd"
    " | /Return/ReturnData/IRS990/AnnualDisclosureCoveredPersons": "Annual disclosure of COIs?",
    "/Return/ReturnData/IRS990/RegularMonitoringEnfrcInd"
    " | /Return/ReturnData/IRS990/RegularMonitoringEnforcement": "Monitoring of COI policy?",
    "/Return/ReturnData/IRS990/WhistleblowerPolicyInd"
    " | /Return/ReturnData/IRS990/WhistleblowerPolicy": "Written whistleblower policy?",
    "/Return/ReturnData/IRS990/DocumentRetentionPolicyInd"
    " | /Return/ReturnData/IRS990/DocumentRetentionPolicy": "Org has written document retention policy?",
    "/Return/ReturnData/IRS990/CompensationProcessCEOInd"
    " | /Return/ReturnData/IRS990/CompensationProcessCEO": "Compensation process CEO?",
    "/Return/ReturnData/IRS990/CompensationProcessOtherInd"
    " | /Return/ReturnData/IRS990/CompensationProcessOther": "Compensation process other?",
    "/Return/ReturnData/IRS990/IndependentAuditFinclStmtInd"
    " | /Return/ReturnData/IRS990/IndependentAuditFinancialStmt": "Independently audited?",
    "/Return/ReturnData/IRS990/ConsolidatedAuditFinclStmtInd"
    " | /Return/ReturnData/IRS990/ConsolidatedAuditFinancialStmt": "Consolidated audit?",
})

COMMON_FIELD_SPEC = FieldSpec.from_mapping(COMMON_FIELDS)
DEFAULT_FIELD_SPEC = FieldSpec.from_mapping(DEFAULT_FIELDS)
