from typing import Optional

from customers.domain.search import SearchCriteria

SEARCH_CRITERIA_LABELS = {
    SearchCriteria.NAME_AND_SURNAME: "Wyszukiwanie (Imię i nazwisko)",
    SearchCriteria.CERTIFICATE_NUMBER: "Wyszukiwanie (Numer świadectwa)",
    SearchCriteria.SEX: "Wyszukiwanie (Płeć)",
    SearchCriteria.ADDRESS: "Wyszukiwanie (Adres zamieszkania)",
    SearchCriteria.DATE_OF_BIRTH: "Wyszukiwanie (Data urodzenia)",
    SearchCriteria.PLACE_OF_BIRTH: "Wyszukiwanie (Miejsce urodzenia)",
    SearchCriteria.DATE_OF_DEATH: "Wyszukiwanie (Data śmierci)",
    SearchCriteria.PLACE_OF_DEATH: "Wyszukiwanie (Miejsce śmierci)",
    SearchCriteria.DEATH_CERTIFICATE_NUMBER: "Wyszukiwanie (Numer aktu zgonu)",
    SearchCriteria.ISSUE_DATE: "Wyszukiwanie (Data wydania aktu zgonu)",
    SearchCriteria.ISSUED_BY: "Wyszukiwanie (Akt zgonu wydany przez)",
}


class SearchCriteriaToStringConverter:
    """Turns a search criterion into the label shown in the search selector."""

    def convert(self, value) -> Optional[str]:
        if isinstance(value, SearchCriteria):
            return SEARCH_CRITERIA_LABELS[value]
        return None

    def convert_back(self, value) -> Optional[SearchCriteria]:
        for criteria, label in SEARCH_CRITERIA_LABELS.items():
            if label == value:
                return criteria
        return None
