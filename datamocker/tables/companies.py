"""Company names by continent and country, and name parts by industry."""

from __future__ import annotations

from types import MappingProxyType

from datamocker.types import Continent, Industry

CONTINENT_COMPANIES: MappingProxyType[Continent, tuple[str, ...]] = MappingProxyType(
    {
        Continent.AFRICA: ("Safaricom", "Dangote Group", "MTN Group", "Shoprite", "Ecobank"),
        Continent.AMERICA: ("Apple", "Microsoft", "Google", "Amazon", "Tesla"),
        Continent.EUROPE: ("Siemens", "Volkswagen", "Nestle", "Shell", "Unilever"),
        Continent.ASIA: ("Samsung", "Toyota", "Alibaba", "Huawei", "Sony"),
        Continent.AUSTRALIA: ("BHP", "Woolworths", "Telstra", "Qantas", "Commonwealth Bank"),
        Continent.GLOBAL: ("Coca-Cola", "McDonald's", "Nike", "Disney", "IBM"),
    }
)

COUNTRY_COMPANIES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "US": ("Apple", "Google", "Amazon", "Tesla", "Walmart"),
        "UK": ("BP", "HSBC", "Tesco", "Rolls-Royce", "Barclays"),
        "NG": ("Dangote Group", "MTN Nigeria", "Zenith Bank", "Glo", "First Bank"),
        "JP": ("Toyota", "Sony", "Honda", "Nintendo", "Panasonic"),
        "DE": ("Siemens", "Volkswagen", "BMW", "Bosch", "Allianz"),
        "FR": ("TotalEnergies", "L'Oreal", "Danone", "Renault", "Carrefour"),
        "CA": ("Shopify", "RBC", "Bombardier", "Lululemon", "Tim Hortons"),
        "IN": ("Tata Group", "Infosys", "Reliance", "Wipro", "Mahindra"),
        "ZA": ("Sasol", "Naspers", "Vodacom", "Standard Bank", "Woolworths SA"),
        "CN": ("Alibaba", "Tencent", "Huawei", "Baidu", "Xiaomi"),
    }
)

INDUSTRY_PREFIXES: MappingProxyType[Industry, tuple[str, ...]] = MappingProxyType(
    {
        Industry.TECH: ("Tech", "Nex", "Cyber", "Inno", "Data"),
        Industry.RETAIL: ("Shop", "Market", "Store", "Retail", "Trade"),
        Industry.MANUFACTURING: ("Indust", "Manu", "Forge", "Build", "Works"),
        Industry.FINANCE: ("Bank", "Fin", "Invest", "Capital", "Trust"),
        Industry.GLOBAL: ("Global", "United", "General", "Prime", "Allied"),
    }
)

CORPORATE_SUFFIXES: tuple[str, ...] = (
    "Inc.", "Ltd", "LLC", "GmbH", "Co.", "Corp", "Group", "Solutions",
)

GENERIC_TERMS: tuple[str, ...] = ("ify", "tron", "ex", "ly", "on", "is", "um", "er")
