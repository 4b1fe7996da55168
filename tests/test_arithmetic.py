"""Tests for arithmetic on bounds."""

import copy
import pickle

import pytest

from greater_less import Bound, IncompatibleBoundsError, Sign, construct, to_bound


@pytest.fixture
def subject() -> Bound:
    return construct(">4.5")


class TestMultiplication:
    """Tests for multiplying bounds by numbers."""

    def test_returns_bound(self, subject: Bound) -> None:
        assert isinstance(subject * 4, Bound)
        assert isinstance(4 * subject, Bound)

    def test_multiplies_value(self, subject: Bound) -> None:
        assert (subject * 4).value == 18
        assert (4 * subject).value == 18

    def test_positive_factor_keeps_sign(self, subject: Bound) -> None:
        assert (subject * 4).sign is subject.sign
        assert (4 * subject).sign is subject.sign

    def test_negative_factor_inverts_sign(self, subject: Bound) -> None:
        assert (subject * -4).sign is subject.sign.inverted()
        assert (-4 * subject).sign is subject.sign.inverted()

    def test_zero_factor_inverts_sign(self, subject: Bound) -> None:
        assert subject * 0 == Bound(Sign.LESS_THAN, 0.0)

    def test_examples(self) -> None:
        assert construct(">3.45") * 2 == construct(">6.9")
        assert construct(">3.45") * -1 == construct("<-3.45")
        assert -1 * construct(">3.45") == construct("< -3.45")

    def test_unsigned_bound_acts_as_number(self, subject: Bound) -> None:
        assert subject * to_bound(4) == subject * 4
        assert to_bound(-4) * subject == -4 * subject

    def test_two_signed_bounds(self, subject: Bound) -> None:
        with pytest.raises(IncompatibleBoundsError):
            subject * construct("<1.2")


class TestDivision:
    """Tests for dividing bounds by numbers and numbers by bounds."""

    def test_returns_bound(self, subject: Bound) -> None:
        assert isinstance(subject / 4, Bound)
        assert isinstance(4 / subject, Bound)

    def test_divides_value(self, subject: Bound) -> None:
        assert (subject / 4).value == 4.5 / 4
        assert (4 / subject).value == 4 / 4.5

    def test_positive_denominator_keeps_sign(self, subject: Bound) -> None:
        assert (subject / 4).sign is subject.sign

    def test_negative_denominator_inverts_sign(self, subject: Bound) -> None:
        assert (subject / -4).sign is subject.sign.inverted()

    def test_bound_as_denominator_inverts_sign(self, subject: Bound) -> None:
        assert (4 / subject).sign is subject.sign.inverted()

    def test_negative_numerator_keeps_sign(self, subject: Bound) -> None:
        assert (-4 / subject).sign is subject.sign

    def test_examples(self) -> None:
        assert 1 / construct(">3.45") == Bound(Sign.LESS_THAN, 1 / 3.45)
        assert -1 / construct(">3.45") == Bound(Sign.GREATER_THAN, -1 / 3.45)

    def test_unsigned_bound_acts_as_number(self, subject: Bound) -> None:
        assert subject / to_bound(4) == subject / 4
        assert to_bound(4) / subject == 4 / subject
        assert to_bound(-4) / subject == -4 / subject

    def test_division_by_zero(self, subject: Bound) -> None:
        with pytest.raises(ZeroDivisionError):
            subject / 0

    def test_two_signed_bounds(self, subject: Bound) -> None:
        with pytest.raises(IncompatibleBoundsError):
            subject / construct("<1.2")


class TestAddition:
    """Tests for adding numbers to bounds."""

    def test_returns_bound(self, subject: Bound) -> None:
        assert isinstance(subject + 4, Bound)
        assert isinstance(4 + subject, Bound)

    def test_adds_value(self, subject: Bound) -> None:
        assert (subject + 4).value == 8.5
        assert (4 + subject).value == 8.5

    def test_keeps_sign(self, subject: Bound) -> None:
        assert (subject + 4).sign is subject.sign
        assert (4 + subject).sign is subject.sign
        assert (subject + -10).sign is subject.sign

    def test_two_signed_bounds(self) -> None:
        with pytest.raises(IncompatibleBoundsError, match="both operands are open-ended"):
            construct(">1") + construct("<2")

    def test_error_carries_operands(self) -> None:
        left, right = construct(">1"), construct(">2")
        with pytest.raises(IncompatibleBoundsError) as exc_info:
            left + right
        assert exc_info.value.left == left
        assert exc_info.value.right == right


class TestSubtraction:
    """Tests for subtraction in both directions."""

    def test_returns_bound(self, subject: Bound) -> None:
        assert isinstance(subject - 4, Bound)
        assert isinstance(4 - subject, Bound)

    def test_subtracts_value(self, subject: Bound) -> None:
        assert (subject - 4).value == 0.5
        assert (4 - subject).value == -0.5

    def test_subtracting_number_keeps_sign(self, subject: Bound) -> None:
        assert (subject - 4).sign is subject.sign

    def test_subtracting_bound_inverts_sign(self, subject: Bound) -> None:
        assert (4 - subject).sign is subject.sign.inverted()

    def test_two_signed_bounds(self, subject: Bound) -> None:
        with pytest.raises(IncompatibleBoundsError):
            subject - construct("<1.2")


class TestNegation:
    """Tests for unary minus and plus."""

    def test_returns_bound(self, subject: Bound) -> None:
        assert isinstance(-subject, Bound)

    def test_negates_value(self, subject: Bound) -> None:
        assert (-subject).value == -subject.value

    def test_inverts_sign(self, subject: Bound) -> None:
        assert (-subject).sign is subject.sign.inverted()

    def test_example(self) -> None:
        assert -construct(">3.45") == construct("<-3.45")
        assert str(-construct(">3.45")) == "< -3.45"

    @pytest.mark.parametrize("text", [">3.45", "<3.45", "> -2", "<0"])
    def test_involution(self, text: str) -> None:
        bound = construct(text)
        assert -(-bound) == bound

    def test_unary_plus(self, subject: Bound) -> None:
        assert +subject is subject


class TestOperands:
    """Tests for operands that are not numbers and for immutability."""

    @pytest.mark.parametrize("other", ["4", None, [4]])
    def test_unsupported_operand(self, subject: Bound, other: object) -> None:
        with pytest.raises(TypeError):
            subject + other  # type: ignore[operator]
        with pytest.raises(TypeError):
            other * subject  # type: ignore[operator]

    def test_operands_are_not_mutated(self, subject: Bound) -> None:
        _ = subject * -2
        _ = subject + 1
        _ = -subject
        assert subject == construct(">4.5")

    def test_immutable(self, subject: Bound) -> None:
        with pytest.raises(AttributeError, match="immutable"):
            subject.value = 1.0  # type: ignore[misc]
        with pytest.raises(AttributeError, match="immutable"):
            del subject.sign
        assert subject == construct(">4.5")

    def test_copy_and_pickle(self, subject: Bound) -> None:
        assert copy.copy(subject) == subject
        assert copy.deepcopy(subject) == subject
        assert pickle.loads(pickle.dumps(subject)) == subject  # noqa: S301

    def test_value_is_float(self) -> None:
        bound = Bound(Sign.GREATER_THAN, 3)
        assert type(bound.value) is float

    def test_invalid_sign(self) -> None:
        with pytest.raises(TypeError, match="Sign"):
            Bound(">", 3.0)  # type: ignore[arg-type]
