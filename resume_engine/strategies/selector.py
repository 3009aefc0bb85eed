from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from resume_engine.schemas import Profile

from .policies import DEFAULT_POLICIES, EXPERIENCED_PROFESSIONAL, StrategyPolicy
from .signals import ProfileSignals

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StrategySelection:
    policy: StrategyPolicy
    confidence: float
    reasons: list[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.policy.name


class StrategySelector:
    """Scores a profile against the registered policies and picks one."""

    def __init__(self, policies: Iterable[StrategyPolicy] | None = None) -> None:
        self._policies: list[StrategyPolicy] = list(policies if policies is not None else DEFAULT_POLICIES)
        if not self._policies:
            raise ValueError("StrategySelector needs at least one policy.")

    @property
    def names(self) -> list[str]:
        return [policy.name for policy in self._policies]

    def register(self, policy: StrategyPolicy) -> None:
        """Add a policy; one with an existing name replaces it in place."""
        for index, existing in enumerate(self._policies):
            if existing.name == policy.name:
                self._policies[index] = policy
                return
        self._policies.append(policy)

    def _find(self, name: str | None) -> StrategyPolicy | None:
        if not name:
            return None
        for policy in self._policies:
            if policy.name == name:
                return policy
        return None

    def default_policy(self) -> StrategyPolicy:
        return self._find(EXPERIENCED_PROFESSIONAL) or self._policies[0]

    def get(self, name: str | None) -> StrategyPolicy:
        return self._find(name) or self.default_policy()

    def rank(self, profile: Profile) -> list[StrategySelection]:
        """Every registered policy with its confidence, best first; ties keep declaration order."""
        signals = ProfileSignals.from_profile(profile)
        scored: list[StrategySelection] = []
        for policy in self._policies:
            if not policy.is_applicable(signals):
                scored.append(StrategySelection(policy=policy, confidence=0.0, reasons=["Not applicable for this profile"]))
                continue
            confidence, reasons = policy.score(signals)
            scored.append(StrategySelection(policy=policy, confidence=confidence, reasons=reasons))
        return sorted(scored, key=lambda selection: selection.confidence, reverse=True)

    def select(self, profile: Profile, override: str | None = None) -> StrategySelection:
        if override:
            policy = self._find(override)
            if policy is not None:
                logger.info("strategy_selected name=%s confidence=1.0 override=true", policy.name)
                return StrategySelection(policy=policy, confidence=1.0, reasons=["Manual override selected"])
            logger.warning("strategy_override_ignored name=%s", override)

        signals = ProfileSignals.from_profile(profile)
        best: StrategySelection | None = None
        for policy in self._policies:
            if not policy.is_applicable(signals):
                continue
            confidence, reasons = policy.score(signals)
            if best is None or confidence > best.confidence:
                best = StrategySelection(policy=policy, confidence=confidence, reasons=reasons)

        if best is None:
            best = StrategySelection(
                policy=self.default_policy(),
                confidence=0.0,
                reasons=["No applicable strategy, using default"],
            )
        logger.info("strategy_selected name=%s confidence=%.2f", best.name, best.confidence)
        return best
