import pytest

from vrs_backend.core.salary import calculate_salary_info, round_currency


def test_scenario_a_salary():
    info = calculate_salary_info(basic=77380, da=168534, remaining_months=57)

    assert info.basic_plus_da == 245914
    assert info.per_day_salary == 8197.13
    assert info.basic_plus_da_till_retirement == 14017098.00
    assert info.pf_contribution == 29509.68
    assert info.sbfp_contribution == 7377.42


def test_contribution_rates_are_fixed():
    info = calculate_salary_info(basic=1000, da=0, remaining_months=1)

    assert info.pf_contribution == 120.00
    assert info.sbfp_contribution == 30.00


def test_basic_plus_da_is_not_rounded():
    info = calculate_salary_info(basic=100.005, da=0.001, remaining_months=0)

    assert info.basic_plus_da == pytest.approx(100.006)
    assert info.basic_plus_da_till_retirement == 0


def test_zero_and_negative_inputs_are_accepted():
    zero = calculate_salary_info(basic=0, da=0, remaining_months=0)
    assert zero.per_day_salary == 0
    assert zero.pf_contribution == 0

    negative = calculate_salary_info(basic=-300, da=0, remaining_months=-2)
    assert negative.per_day_salary == -10.00
    assert negative.basic_plus_da_till_retirement == 600.00


@pytest.mark.parametrize(
    "value, expected",
    [
        (8197.133333, 8197.13),
        (0.125, 0.13),  # exact binary tie rounds up, unlike round()
        (2.675, 2.67),  # stored just below the tie
        (-0.125, -0.13),
        (10, 10.0),
    ],
)
def test_round_currency(value, expected):
    assert round_currency(value) == expected


def test_huge_pay_is_accepted():
    info = calculate_salary_info(basic=1e26, da=1.0, remaining_months=57)

    assert info.basic_plus_da == 1e26
    assert info.per_day_salary == pytest.approx(1e26 / 30)
    assert info.basic_plus_da_till_retirement == pytest.approx(57e26)
    assert info.pf_contribution == pytest.approx(1.2e25)


@pytest.mark.parametrize("value", [2.0 ** 52, -(2.0 ** 52), 1e27, 1.5e300])
def test_round_currency_leaves_whole_number_floats_alone(value):
    assert round_currency(value) == value
