"""Field-name classification tables for provider payloads.

Every entry is a *normalized* key: lowercase with underscores removed, the form
``classifier.normalize_key`` produces. Tables are frozen at import time and
shared by all callers.

Several names appear in more than one table (per-share and aggregate fields
are listed both as dollar and non-percent fields). The classifier checks
dollar first, so those resolve to ``FieldCategory.DOLLAR``.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Dollar fields (comma-grouped amounts)
# ---------------------------------------------------------------------------
DOLLAR_FIELDS: frozenset[str] = frozenset({
    # Cash flow statement
    "netcashprovidedbyoperatingactivities", "changeinworkingcapital", "deferredincometax",
    "stockbasedcompensation", "accountsreceivable", "inventory", "accountspayable",
    "otherworkingcapital", "othernoncashitems", "netcashprovidedbyinvestingactivities",
    "investmentsinpropertyplantandequipment", "purchaseofinvestments", "saleofinvestments",
    "netcashusedprovidedbyfinancingactivities", "debtrepayment", "commonstockissued",
    "commonstockrepurchased", "dividendspaid", "otherfinancingactivites",
    "effectofforexchangesoncash", "netchangeincash", "cashatendofperiod",
    "cashatbeginningofperiod", "operatingcashflow", "capitalexpenditure", "freecashflow",
    # Balance sheet statement
    "cashandcashequivalents", "shortterminvestments", "netreceivables", "othercurrentassets",
    "totalcurrentassets", "propertyplantequipmentnet", "goodwill", "intangibles",
    "longterminvestments", "taxassets", "otherassets", "totalassets", "shorttermdebt",
    "taxpayables", "deferredrevenue", "othercurrentliabilities", "totalcurrentliabilities",
    "longtermdebt", "deferredrevenuenoncurrent", "deferredtaxliabilitiesnoncurrent",
    "othernoncurrentliabilities", "totalliabilities", "capitalleaseobligations", "commonstock",
    "retainedearnings", "accumulatedothercomprehensiveincomeloss",
    "othertotalstockholdersequity", "totalstockholdersequity",
    "totalliabilitiesandstockholdersequity",
    # Income statement
    "revenue", "costofrevenue", "grossprofit", "researchanddevelopmentexpenses",
    "generalandadministrativeexpenses", "sellingandmarketingexpenses",
    "sellinggeneralandadministrativeexpenses", "otherexpenses", "operatingexpenses",
    "costandexpenses", "interestincome", "interestexpense", "depreciationandamortization",
    "ebitda", "operatingincome", "totalotherincomeexpensesnet", "incomebeforetax",
    "incometaxexpense", "netincome",
    # Quote fields (eps, sharesoutstanding and changespercentage excluded)
    "price", "dayhigh", "daylow", "yearhigh", "yearlow", "marketcap", "priceavg50",
    "priceavg200", "previousclose", "open", "volume", "avgvolume", "pe",
    # Aggregates and per-share amounts
    "enterprisevalue", "workingcapital", "tangibleassetvalue", "netcurrentassetvalue",
    "investedcapital", "averagereceivables", "averagepayables", "averageinventory",
    "capexpershare", "grahamnumber", "grahamnetnet", "netincomepershare", "revenuepershare",
    "operatingcashflowpershare", "freecashflowpershare", "cashpershare", "bookvaluepershare",
    "tangiblebookvaluepershare", "shareholdersequitypershare", "interestdebtpershare",
    # TTM per-share amounts
    "revenuepersharettm", "netincomepersharettm", "operatingcashflowpersharettm",
    "freecashflowpersharettm", "cashpersharettm", "bookvaluepersharettm",
    "tangiblebookvaluepersharettm", "shareholdersequitypersharettm",
    "interestdebtpersharettm", "capexpersharettm",
    # TTM aggregates
    "marketcapttm", "enterprisevaluettm", "workingcapitalttm", "tangibleassetvaluettm",
    "netcurrentassetvaluettm", "investedcapitalttm", "averagereceivablesttm",
    "averagepayablesttm", "averageinventoryttm",
})

# ---------------------------------------------------------------------------
# Multiple fields (plain 2-decimal numbers)
# ---------------------------------------------------------------------------
MULTIPLE_FIELDS: frozenset[str] = frozenset({
    # Key-metrics multiples
    "peratio", "pricetosalesratio", "pocfratio", "pfcfratio", "pbratio", "ptbratio",
    "evtosales", "enterprisevalueoverebitda", "evtooperatingcashflow", "evtofreecashflow",
    "netdebtoebitda", "currentratio", "incomequality", "interestcoverage",
    "daysofsalesoutstanding", "dayspayablesoutstanding", "daysofinventoryonhand",
    "receivablesturnover", "payablesturnover", "inventoryturnover",
    "debttoequity", "debttoassets",
    # TTM key-metrics multiples ("poctratiottm" is what the provider has shipped)
    "peratiottm", "pricetosalesratiottm", "poctratiottm", "pfcfratiottm", "pbratiottm",
    "ptbratiottm", "evtosalesttm", "enterprisevalueoverebitdattm", "evtooperatingcashflowttm",
    "evtofreecashflowttm", "netdebtoebitdattm", "currentratiottm", "incomequalityttm",
    "interestcoveragettm", "daysofsalesoutstandingttm", "dayspayablesoutstandingttm",
    "daysofinventoryonhandttm", "receivablesturnoverttm", "payablesturnoverttm",
    "inventoryturnoverttm", "debttoequityttm", "debttoassetsttm", "pocfratiottm",
    "pegratiottm", "enterprisevaluemultiplettm",
    # Ratios endpoint
    "quickratio", "cashratio", "fixedassetturnover", "assetturnover", "operatingprofitratio",
    "pretaxprofitmargin", "netprofitmargin", "returnonassets", "returnonequity",
    "returnoncapitalemployed", "debttoequityratio", "debttoassetsratio",
    "longtermdebttocapitalization", "totaldebttocapitalization", "companyequitymultiplier",
    "pricebookratio", "pricesalesratio", "priceearningsratio", "pricefreecashflowratio",
    "priceoperatingcashflowratio", "pricecashflowratio", "priceearningsgrowthratio",
    "enterprisevaluemultiple", "pricefairvalue", "daysofinventoryoutstanding",
    "operatingcycle", "daysofpayablesoutstanding", "cashconversioncycle", "debtequityratio",
    "pricebookvalueratio", "pricetobookratio", "pricetofreecashflowratio",
    "pricetooperatingcashflowratio", "priceearningstogrowthratio",
    "pricetofreecashflowsratio", "pricetooperatingcashflowsratio",
    # TTM ratios
    "quickratiottm", "cashratiottm", "daysofinventoryoutstandingttm", "operatingcyclettm",
    "daysofpayablesoutstandingttm", "cashconversioncyclettm", "debtequityratiottm",
    "pricebookvalueratiottm", "pricetobookratiottm", "pricetofreecashflowsratiottm",
    "pricetooperatingcashflowsratiottm", "priceearningstogrowthratiottm",
    "fixedassetturnoverttm", "assetturnoverttm", "companyequitymultiplierttm",
    "pricecashflowratiottm", "priceearningsratiottm", "pricesalesratiottm",
    "pricefairvaluettm", "enterprisevaluemultiplierttm",
})

# ---------------------------------------------------------------------------
# Non-percent fields (per-share values, share counts, EPS)
# ---------------------------------------------------------------------------
NON_PERCENT_FIELDS: frozenset[str] = frozenset({
    "eps", "epsdiluted", "weightedaverageshsout", "weightedaverageshsoutdil",
    "netincomepershare", "revenuepershare", "operatingcashflowpershare",
    "freecashflowpershare", "cashpershare", "bookvaluepershare", "tangiblebookvaluepershare",
    "shareholdersequitypershare", "interestdebtpershare", "capexpershare",
    "marketcap", "enterprisevalue", "workingcapital", "tangibleassetvalue",
    "netcurrentassetvalue", "investedcapital", "averagereceivables", "averagepayables",
    "averageinventory", "grahamnumber", "grahamnetnet",
    # TTM per-share
    "revenuepersharettm", "netincomepersharettm", "operatingcashflowpersharettm",
    "freecashflowpersharettm", "cashpersharettm", "bookvaluepersharettm",
    "tangiblebookvaluepersharettm", "shareholdersequitypersharettm",
    "interestdebtpersharettm", "capexpersharettm",
    # TTM aggregates
    "marketcapttm", "enterprisevaluettm", "workingcapitalttm", "tangibleassetvaluettm",
    "netcurrentassetvaluettm", "investedcapitalttm", "averagereceivablesttm",
    "averagepayablesttm", "averageinventoryttm",
})

# Substrings that mark a field as non-percent even when it is not listed.
NON_PERCENT_SUBSTRINGS: tuple[str, ...] = ("eps", "shsout")

# Fields with this prefix are always percentages.
GROWTH_PREFIX = "growth"

# ---------------------------------------------------------------------------
# Quote payload fields
# ---------------------------------------------------------------------------
QUOTE_PRICE_FIELDS: frozenset[str] = frozenset({
    "price", "dayhigh", "daylow", "yearhigh", "yearlow", "marketcap", "priceavg50",
    "priceavg200", "volume", "avgvolume", "pe", "previousclose", "open",
})
QUOTE_CHANGE_PERCENT_FIELD = "changespercentage"
QUOTE_SHARES_FIELD = "sharesoutstanding"
QUOTE_EPS_FIELD = "eps"

# ---------------------------------------------------------------------------
# Earnings calendar entry fields
# ---------------------------------------------------------------------------
EARNINGS_CALENDAR_KEY = "earningsCalendar"
EARNINGS_REVENUE_FIELDS: tuple[str, ...] = ("revenueActual", "revenueEstimate")
EARNINGS_EPS_FIELDS: tuple[str, ...] = ("epsActual", "epsEstimate")
