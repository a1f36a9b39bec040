"""
Quality assessment from facet results.

Turns the error rates of each facet into precision, recall and F1 scores
(all in percent) and an overall verdict:

    entries        precision = recall = 100
    people         precision = recall = match precision rate
    references     precision = 100 - precision error rate, recall = 100 - recall error rate
    relationships  precision = 100 - error rate, recall = 100
    events         as references

A facet that compared no entries scores 100.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from .config import ComparisonConfig
from .model import FacetResult, PeopleResult

CATEGORIES = ('entries', 'people', 'references', 'relationships', 'events')


def f1_score(precision: float, recall: float) -> float:
    """F1 = 2 * (precision * recall) / (precision + recall); 0 when both are 0."""
    if precision + recall == 0:
        return 0.0
    return 2 * precision * recall / (precision + recall)


@dataclass
class CategoryQuality:
    """Precision and recall (percent) of one category."""
    precision: float = 100.0
    recall: float = 100.0

    @property
    def f1(self) -> float:
        return f1_score(self.precision, self.recall)

    def to_dict(self) -> Dict[str, float]:
        return {
            'precision': round(self.precision, 4),
            'recall': round(self.recall, 4),
            'f1': round(self.f1, 4),
        }


@dataclass
class QualityReport:
    """Quality of every category plus the overall verdict."""
    categories: Dict[str, CategoryQuality] = field(default_factory=dict)
    config: ComparisonConfig = field(default_factory=ComparisonConfig, repr=False)

    @property
    def average_f1(self) -> float:
        if not self.categories:
            return 0.0
        return sum(q.f1 for q in self.categories.values()) / len(self.categories)

    @property
    def verdict(self) -> str:
        return self.config.verdict(self.average_f1)

    def to_dict(self) -> Dict[str, object]:
        return {
            'categories': {name: q.to_dict() for name, q in self.categories.items()},
            'average_f1': round(self.average_f1, 4),
            'verdict': self.verdict,
        }


def _error_quality(result: Optional[FacetResult]) -> CategoryQuality:
    if result is None or result.entries_compared == 0:
        return CategoryQuality()
    return CategoryQuality(
        precision=max(0.0, 100.0 - result.precision_error_rate),
        recall=max(0.0, 100.0 - result.recall_error_rate),
    )


def assess_quality(people: Optional[PeopleResult] = None,
                   references: Optional[FacetResult] = None,
                   relationships: Optional[FacetResult] = None,
                   events: Optional[FacetResult] = None,
                   config: Optional[ComparisonConfig] = None) -> QualityReport:
    """
    Score the facet results of one comparison.

    Args:
        people: Result of the people facet
        references: Result of the references facet
        relationships: Result of the relationships facet
        events: Result of the events facet
        config: Configuration holding the verdict bands

    Returns:
        QualityReport with one CategoryQuality per category
    """
    report = QualityReport(config=config if config is not None else ComparisonConfig())
    report.categories['entries'] = CategoryQuality()

    if people is not None and people.entries_compared > 0:
        report.categories['people'] = CategoryQuality(people.precision_rate, people.precision_rate)
    else:
        report.categories['people'] = CategoryQuality()

    report.categories['references'] = _error_quality(references)

    if relationships is not None and relationships.entries_compared > 0:
        report.categories['relationships'] = CategoryQuality(
            precision=max(0.0, 100.0 - relationships.recall_error_rate),
            recall=100.0,
        )
    else:
        report.categories['relationships'] = CategoryQuality()

    report.categories['events'] = _error_quality(events)
    return report
