"""
Closed value sets and messages shared by several resources.
"""

PRIORITIES = ("low", "medium", "high", "urgent")

STATUS_REQUIRED = "Durum zorunlu."
PRIORITY_REQUIRED = "Öncelik zorunlu."
PROJECT_REQUIRED = "Proje zorunlu."
START_DATE_REQUIRED = "Başlangıç tarihi zorunlu."
END_DATE_REQUIRED = "Bitiş tarihi zorunlu."
