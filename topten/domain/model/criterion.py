"""Criterion entity.

A criterion is a named dimension every item in a list is rated on.
"""

from topten.domain.model.common import DomainModel
from topten.domain.value import CriterionId, CriterionName


class Criterion(DomainModel):
    """Criterion entity, owned by its list."""

    id: CriterionId
    name: CriterionName
