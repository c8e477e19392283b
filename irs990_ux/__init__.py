"""
irs990-ux - IRS Form 990 XML returns to CSV

Resolves EINs to returns via the IRS bulk index files, caches returns
locally and extracts a configurable set of fields across schema years.
"""
__version__ = "0.1.0"
