"""Tests for derived metrics calculators."""

from datetime import date

import pytest

from app.domain.entities import (
    ActivityLevel,
    Finance,
    Meal,
    NutritionGoal,
    Sex,
    Study,
    Task,
    Workout,
)
from app.domain.services import (
    calculate_bmr,
    calculate_tdee,
    finance_totals,
    meal_calories,
    pending_tasks,
    study_average,
    total_calories,
    workouts_this_week,
)


def _finance(id, amount, kind):
    # model_construct skips validation so invalid amounts can be simulated
    return Finance.model_construct(
        id=id,
        description="x",
        amount=amount,
        category="x",
        kind=kind,
        date="2024-01-01",
    )


def _meal(calories=0, items=None, date="2024-11-28"):
    return Meal.model_validate(
        {
            "id": "m",
            "name": "Refeição",
            "calories": calories,
            "date": date,
            "mealSlot": "lunch",
            "items": items or [],
        }
    )


class TestFinanceTotals:
    """Test suite for finance_totals."""

    def test_income_expense_balance(self):
        """Test the reference example."""
        totals = finance_totals([
            _finance("1", "500", "income"),
            _finance("2", "200", "expense"),
            _finance("3", "50", "expense"),
        ])

        assert totals.income == 500
        assert totals.expense == 250
        assert totals.balance == 250
        assert totals.invalid_ids == []

    def test_invalid_amounts_count_as_zero_and_are_flagged(self):
        """Test non-numeric amounts do not poison the totals."""
        totals = finance_totals([
            _finance("ok", "100.5", "income"),
            _finance("bad", "abc", "income"),
            _finance("nan", "NaN", "expense"),
        ])

        assert totals.income == 100.5
        assert totals.expense == 0
        assert totals.invalid_ids == ["bad", "nan"]

    def test_empty(self):
        """Test no records gives zero totals."""
        totals = finance_totals([])
        assert totals.to_dict() == {
            "income": 0.0,
            "expense": 0.0,
            "balance": 0.0,
            "invalidIds": [],
        }


class TestCalories:
    """Test suite for calorie totals."""

    def test_scalar_calories(self):
        """Test meals without items use their calories field."""
        assert total_calories([_meal(450), _meal(650), _meal()]) == 1100

    def test_food_items_use_servings(self):
        """Test meals with items sum calories * servings."""
        meal = _meal(
            calories=999,
            items=[
                {"name": "Ovo", "calories": 70, "servings": 3},
                {"name": "Pão", "calories": 150},
            ],
        )
        assert meal_calories(meal) == 360

    def test_filter_by_day(self):
        """Test only meals of the given day are counted."""
        meals = [_meal(300, date="2024-11-28"), _meal(500, date="2024-11-27")]
        assert total_calories(meals, day=date(2024, 11, 28)) == 300


class TestTdeeCalculator:
    """Test suite for the TDEE/macro calculator."""

    def test_bmr_male_and_female(self):
        """Test Mifflin-St Jeor for both sexes."""
        assert calculate_bmr(70, 175, 25, Sex.MALE) == 1673.75
        assert calculate_bmr(70, 175, 25, Sex.FEMALE) == 1507.75

    def test_reference_example(self):
        """Test 25y male, 70kg, 175cm, moderate, maintenance."""
        result = calculate_tdee(
            age=25,
            sex="M",
            weight=70,
            height=175,
            activity_level="moderate",
            goal="maintenance",
        )

        assert result.bmr == 1674
        assert result.tdee == 2594  # round(1673.75 * 1.55)
        assert result.target_calories == 2594
        assert result.protein == 195
        assert result.carbs == 259
        assert result.fat == 86

    def test_accepts_form_strings(self):
        """Test string inputs are parsed like the form sends them."""
        result = calculate_tdee("30", "F", "60.5", "165", "sedentary", "weight_loss")

        # BMR = 605 + 1031.25 - 150 - 161 = 1325.25; TDEE = round(1590.3) = 1590
        assert result.bmr == 1325
        assert result.tdee == 1590
        assert result.target_calories == 1090

    @pytest.mark.parametrize(
        "goal, expected",
        [
            (NutritionGoal.WEIGHT_LOSS, 2094),
            (NutritionGoal.MAINTENANCE, 2594),
            (NutritionGoal.MUSCLE_GAIN, 2894),
        ],
    )
    def test_goal_adjustments(self, goal, expected):
        """Test target calories per goal."""
        result = calculate_tdee(25, Sex.MALE, 70, 175, ActivityLevel.MODERATE, goal)
        assert result.target_calories == expected

    @pytest.mark.parametrize(
        "overrides",
        [
            {"age": ""},
            {"weight": None},
            {"height": "alto"},
            {"sex": "X"},
            {"activity_level": "Moderado"},
            {"goal": ""},
            {"age": 10**400},
            {"weight": 1e308},
        ],
    )
    def test_missing_or_unparseable_inputs_give_no_result(self, overrides):
        """Test the calculator is a no-op with incomplete input."""
        values = {
            "age": 25,
            "sex": "M",
            "weight": 70,
            "height": 175,
            "activity_level": "moderate",
            "goal": "maintenance",
        }
        values.update(overrides)

        assert calculate_tdee(**values) is None


class TestStudyAndTasks:
    """Test suite for study average, pending tasks and weekly workouts."""

    def _study(self, progress):
        return Study(id="s", title="t", category="c", progress=progress)

    def test_study_average(self):
        """Test mean rounded to nearest integer."""
        studies = [self._study(20), self._study(60), self._study(100)]
        assert study_average(studies) == 60

    def test_study_average_rounds_half_up(self):
        """Test .5 rounds up."""
        assert study_average([self._study(0), self._study(1)]) == 1

    def test_study_average_empty(self):
        """Test empty list gives 0."""
        assert study_average([]) == 0

    def test_pending_tasks(self):
        """Test only incomplete tasks are counted."""
        tasks = [
            Task(id=str(i), title="t", date="2024-12-01", priority="low", completed=done)
            for i, done in enumerate([True, False, False])
        ]
        assert pending_tasks(tasks) == 2

    def test_workouts_this_week(self):
        """Test the 7-day window is inclusive of today."""
        workouts = [
            Workout(id=str(i), exercise="Remada", sets=3, reps=10, date=day)
            for i, day in enumerate(["2024-11-28", "2024-11-22", "2024-11-21", "2024-11-29"])
        ]
        assert workouts_this_week(workouts, today=date(2024, 11, 28)) == 2
