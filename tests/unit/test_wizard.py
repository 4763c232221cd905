import pytest

from hireshield.compliance.wizard import STEPS, AuditWizard, WizardError
from hireshield.config.reference import JURISDICTION_REQUIREMENTS


def test_wizard_walks_steps_in_order():
    wizard = AuditWizard()
    assert wizard.step == "states"
    assert [wizard.next() for _ in range(3)] == list(STEPS[1:])
    with pytest.raises(WizardError):
        wizard.next()
    assert wizard.back() == "usage"


def test_back_from_first_step_fails():
    with pytest.raises(WizardError):
        AuditWizard().back()


def test_toggle_adds_and_removes_preserving_order():
    wizard = AuditWizard()
    wizard.toggle("states", "NYC")
    wizard.toggle("states", "CO")
    wizard.toggle("states", "IL")
    wizard.toggle("states", "CO")
    wizard.toggle("usages", "screening")
    assert wizard.jurisdictions == ["NYC", "IL"]
    assert wizard.selection().usages == ["screening"]


def test_toggle_rejects_unknown_field():
    with pytest.raises(WizardError):
        AuditWizard().toggle("budget", "10k")


def test_results_available_mid_wizard():
    wizard = AuditWizard()
    wizard.toggle("states", "NYC")
    result = wizard.results(JURISDICTION_REQUIREMENTS)
    assert wizard.step == "states"
    assert result.risk_score == 20
    assert len(result.findings) == 2


def test_unknown_starting_step_rejected():
    with pytest.raises(WizardError, match="bogus"):
        AuditWizard(step="bogus")
    assert AuditWizard(step="usage").back() == "tools"
