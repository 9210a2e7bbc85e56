"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
import importlib

import streamlit as st
import altair as alt

from src.application.use_cases.get_dashboard import (
    DashboardView,
    GetDashboardUseCase,
)
from src.application.use_cases.get_history import GetHistoryUseCase
from src.application.use_cases.manage_entries import ManageEntriesUseCase
from src.application.use_cases.manage_vehicles import ManageVehiclesUseCase
from src.application.use_cases.record_daily_earnings import (
    RecordDailyEarningsUseCase,
)
from src.domain.constants import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_EXTRA_EARNING_CATEGORIES,
    DEFAULT_PLATFORMS,
    MINUTES_PER_HOUR,
    PLATFORM_99,
    PLATFORM_UBER,
)
from src.domain.models import (
    CarConfig,
    DailyRecord,
    Expense,
    ExtraEarning,
    GoalProgress,
    HistoryEntry,
    MileageProgress,
    PerformanceAnalysis,
    PeriodKind,
    PlatformActivity,
    WeekdayTotals,
)
from src.infrastructure.container import build_record_store, build_settings
from src.infrastructure.logging.logger import get_usage_logger
from src.utils.decimal_utils import coerce_decimal

_PAGES = ("Dashboard", "Log day", "Vehicles", "History")
_PERIOD_LABELS = {
    "Day": PeriodKind.DAY,
    "Week": PeriodKind.WEEK,
    "Month": PeriodKind.MONTH,
}
_PLATFORM_LABELS = {PLATFORM_UBER: "Uber", PLATFORM_99: "99"}
_WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _fetch_dashboard(anchor: date, kind: str) -> DashboardView:
    """Fetch the dashboard view from the records database."""
    settings = build_settings()
    use_case = GetDashboardUseCase(
        record_store=build_record_store(),
        policies=settings.policies,
    )
    return use_case.execute(anchor, kind)


@st.cache_data(show_spinner=False, ttl=60)
def _load_dashboard(anchor: date, kind: str) -> DashboardView:
    """Cached wrapper around _fetch_dashboard for Streamlit sessions."""
    return _fetch_dashboard(anchor, kind)


def _fetch_history(limit: int | None) -> list[HistoryEntry]:
    """Fetch history entries from the records database."""
    settings = build_settings()
    use_case = GetHistoryUseCase(
        record_store=build_record_store(),
        policies=settings.policies,
    )
    return use_case.execute(limit=limit)


@st.cache_data(show_spinner=False, ttl=60)
def _load_history(limit: int | None) -> list[HistoryEntry]:
    """Cached wrapper around _fetch_history."""
    return _fetch_history(limit)


def _fetch_vehicles() -> list[CarConfig]:
    """Fetch every vehicle, the active one first."""
    return ManageVehiclesUseCase(record_store=build_record_store()).list_vehicles()


def _submit_daily_earnings(submission: DailyRecord) -> DailyRecord:
    """Store a day's earnings and drop cached dashboard data.

    Raises:
        ValueError: If the submission contains invalid values.
    """
    use_case = RecordDailyEarningsUseCase(record_store=build_record_store())
    stored = use_case.execute(submission)
    st.cache_data.clear()
    return stored


def _record_id_for(record_store, record_date: date) -> int:
    record = record_store.fetch_daily_record(record_date)
    if record is None:
        raise LookupError(
            f"No record for {record_date.isoformat()}. Log the day first."
        )
    return record.id


def _submit_expense(record_date: date, amount, category: str) -> Expense:
    """Attach an expense to the record of ``record_date``.

    Raises:
        LookupError: If the day has no record.
        ValueError: If the amount or category is invalid.
    """
    record_store = build_record_store()
    record_id = _record_id_for(record_store, record_date)
    stored = ManageEntriesUseCase(record_store=record_store).add_expense(
        record_id,
        amount,
        category,
    )
    st.cache_data.clear()
    return stored


def _submit_extra_earning(
    record_date: date,
    amount,
    category: str,
    description: str,
) -> ExtraEarning:
    """Attach an extra earning to the record of ``record_date``.

    Raises:
        LookupError: If the day has no record.
        ValueError: If the amount or category is invalid.
    """
    record_store = build_record_store()
    record_id = _record_id_for(record_store, record_date)
    stored = ManageEntriesUseCase(record_store=record_store).add_extra_earning(
        record_id,
        amount,
        category,
        description=description,
        earning_date=record_date,
    )
    st.cache_data.clear()
    return stored


def _delete_record(record_date: date) -> bool:
    """Delete the record of ``record_date`` with its entries."""
    record_store = build_record_store()
    record = record_store.fetch_daily_record(record_date)
    if record is None:
        return False
    removed = ManageEntriesUseCase(record_store=record_store).delete_record(
        record.id
    )
    st.cache_data.clear()
    return removed


def _save_vehicle(config: CarConfig) -> CarConfig:
    """Save a vehicle and drop cached dashboard data.

    Raises:
        ValueError: If the vehicle terms are invalid.
    """
    stored = ManageVehiclesUseCase(record_store=build_record_store()).save_vehicle(
        config
    )
    st.cache_data.clear()
    return stored


def _activate_vehicle(config_id: int) -> CarConfig:
    """Switch the active vehicle.

    Raises:
        LookupError: If no vehicle has this id.
    """
    use_case = ManageVehiclesUseCase(record_store=build_record_store())
    activated = use_case.activate_vehicle(config_id)
    st.cache_data.clear()
    return activated


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Verify that the libraries Altair renders through import cleanly.

    Returns:
        tuple[bool, str | None]: Status flag and an error message when a
        dependency is missing or only partially installed.
    """
    checks = (("numpy", "ndarray"), ("pandas", "Timestamp"))
    for module_name, attribute in checks:
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            return False, f"Charts unavailable: cannot import {module_name} ({exc})."
        if not hasattr(module, attribute):
            return False, (
                f"Charts unavailable: {module_name} is missing "
                f"'{attribute}'. Reinstall {module_name}."
            )
    return True, None


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    return f"R$ {value:,.2f}"


def _format_hours(minutes: int) -> str:
    """Format worked minutes as hours and minutes."""
    hours, rest = divmod(int(minutes), MINUTES_PER_HOUR)
    return f"{hours}h{rest:02d}"


def _render_stat_cards(analysis: PerformanceAnalysis) -> None:
    """Render the headline metric cards."""
    gross_col, expenses_col, profit_col, hour_col = st.columns(4)
    gross_col.metric("Gross earnings", _format_currency(analysis.gross_earnings))
    expenses_col.metric(
        "Expenses",
        _format_currency(analysis.total_expenses),
    )
    profit_col.metric("Net profit", _format_currency(analysis.net_profit))
    hour_col.metric("Profit / hour", _format_currency(analysis.profit_per_hour))

    km_col, trips_col, time_col, per_km_col = st.columns(4)
    km_col.metric("Distance", f"{analysis.total_km:,.1f} km")
    trips_col.metric("Trips", str(analysis.total_trips))
    time_col.metric("Time worked", _format_hours(analysis.minutes_worked))
    per_km_col.metric("Profit / km", _format_currency(analysis.profit_per_km))


def _render_progress(
    goal: GoalProgress | None,
    mileage: MileageProgress | None,
) -> None:
    """Render goal and mileage progress bars when they apply."""
    if goal is not None and goal.goal > 0:
        st.subheader("Earnings goal")
        st.progress(min(int(goal.percent), 100))
        st.caption(
            f"{_format_currency(goal.achieved)} of "
            f"{_format_currency(goal.goal)} ({goal.percent:.0f}%)"
        )
    if mileage is not None and mileage.limit > 0:
        st.subheader("Mileage limit")
        st.progress(min(int(mileage.percent), 100))
        caption = (
            f"{mileage.driven:,.1f} of {mileage.limit:,.0f} km "
            f"({mileage.percent:.0f}%)"
        )
        if mileage.over_limit:
            st.warning(f"{caption}: limit exceeded by {-mileage.remaining:,.1f} km")
        else:
            st.caption(caption)


def _prepare_weekday_chart_data(
    weekdays: Sequence[WeekdayTotals],
) -> list[dict[str, str | float]]:
    """Flatten weekday rows into long-form Altair data.

    Args:
        weekdays: Monday to Sunday totals.

    Returns:
        list[dict[str, str | float]]: One row per weekday and series.
    """
    data: list[dict[str, str | float]] = []
    for row in weekdays:
        label = _WEEKDAY_LABELS[row.day.weekday()]
        for platform, amount in row.earnings_by_platform.items():
            data.append(
                {
                    "day": label,
                    "series": _PLATFORM_LABELS.get(platform, platform),
                    "amount": float(amount),
                }
            )
        data.append(
            {
                "day": label,
                "series": "Expenses",
                "amount": float(row.expenses),
            }
        )
    return data


def _render_weekday_chart(weekdays: Sequence[WeekdayTotals]) -> None:
    """Render the grouped bar chart of earnings and expenses per weekday."""
    data = _prepare_weekday_chart_data(weekdays)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("day:N", sort=list(_WEEKDAY_LABELS), title=None),
        xOffset="series:N",
        y=alt.Y("amount:Q", title="R$"),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(range=["#1b9aaa", "#f4a261", "#e76f51"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("day:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    ).properties(height=320)
    st.subheader("This week")
    st.altair_chart(chart, width="stretch")


def _prepare_donut_chart_data(
    categories: Sequence[tuple[str, Decimal]],
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        categories: ``(category, amount)`` pairs sorted by amount.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(categories, key=lambda item: item[1], reverse=True)
    top_items = list(sorted_items[:max_categories])
    other_amount = sum(
        (amount for _, amount in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items.append(("Other", other_amount))
    total_amount = sum(
        (amount for _, amount in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for category, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "amount_label": _format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_expense_chart(
    categories: Sequence[tuple[str, Decimal]],
    chart_size: int = 300,
) -> None:
    """Render a donut chart of expenses by category."""
    if not categories:
        st.info("No expenses in this period.")
        return
    data, _ = _prepare_donut_chart_data(categories)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader("Expenses by category")
    st.altair_chart(chart, width="stretch")


def _render_charts(view: DashboardView) -> None:
    """Render the weekday and category charts, if Altair can run."""
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_weekday_chart(view.weekdays)
    with chart_right:
        _render_expense_chart(view.expense_categories)


def _render_dashboard(view: DashboardView) -> None:
    """Render one dashboard view, with the empty state for missing days."""
    if view.vehicle is None:
        st.caption("No active vehicle: rent, overage and fuel rates are off.")
    else:
        st.caption(f"Vehicle: {view.vehicle.model}")
    if view.analysis is None:
        st.info(
            f"No record for {view.anchor.isoformat()}. "
            "Log the day's earnings to see its results."
        )
        return
    analysis = view.analysis
    st.caption(
        f"{analysis.start} to {analysis.end}, "
        f"{analysis.record_count} day(s) with records"
    )
    _render_stat_cards(analysis)
    _render_progress(view.goal, view.mileage)
    _render_charts(view)


def _render_history(entries: Sequence[HistoryEntry]) -> None:
    """Render past records as a table."""
    st.subheader("History")
    if not entries:
        st.warning("No records yet.")
        return
    data = [
        {
            "Date": entry.record_date.isoformat(),
            "Gross": float(entry.gross_earnings),
            "Expenses": float(entry.total_expenses),
            "Net": float(entry.net_profit),
            "Km": float(entry.total_km),
            "Trips": entry.total_trips,
            "Time": _format_hours(entry.minutes_worked),
        }
        for entry in entries
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=420)


def _render_earnings_form() -> None:
    """Render the form logging one day of platform activity."""
    with st.form("daily_earnings", clear_on_submit=True):
        st.subheader("Log day")
        record_date = st.date_input("Day", value=date.today())
        hours_col, minutes_col = st.columns(2)
        with hours_col:
            hours = st.number_input("Hours worked", min_value=0, value=0, step=1)
        with minutes_col:
            minutes = st.number_input(
                "Minutes worked",
                min_value=0,
                max_value=MINUTES_PER_HOUR - 1,
                value=0,
                step=1,
            )
        platforms: dict[str, PlatformActivity] = {}
        for name in DEFAULT_PLATFORMS:
            label = _PLATFORM_LABELS.get(name, name)
            trips_col, km_col, earnings_col = st.columns(3)
            with trips_col:
                trips = st.number_input(
                    f"{label} trips", min_value=0, value=0, step=1
                )
            with km_col:
                km = st.number_input(
                    f"{label} km", min_value=0.0, value=0.0, step=1.0
                )
            with earnings_col:
                earnings = st.number_input(
                    f"{label} earnings (R$)",
                    min_value=0.0,
                    value=0.0,
                    step=0.01,
                )
            platforms[name] = PlatformActivity(
                trips=int(trips),
                km=coerce_decimal(km),
                earnings=coerce_decimal(earnings),
            )
        price_col, efficiency_col = st.columns(2)
        with price_col:
            fuel_price = st.number_input(
                "Fuel price (R$/l)", min_value=0.0, value=0.0, step=0.01
            )
        with efficiency_col:
            efficiency = st.number_input(
                "Efficiency (km/l)", min_value=0.0, value=0.0, step=0.1
            )
        submitted = st.form_submit_button("Save day")

    if not submitted:
        return
    submission = DailyRecord(
        record_date=record_date,
        minutes_worked=int(hours) * MINUTES_PER_HOUR + int(minutes),
        platforms=platforms,
        fuel_price=coerce_decimal(fuel_price),
        fuel_efficiency_km_l=coerce_decimal(efficiency),
    )
    try:
        stored = _submit_daily_earnings(submission)
    except ValueError as exc:
        st.error(str(exc))
        return
    st.success(f"Saved record for {stored.record_date.isoformat()}.")


def _render_expense_form() -> None:
    """Render the form adding a manual expense to a logged day."""
    with st.form("expense", clear_on_submit=True):
        st.subheader("Add expense")
        record_date = st.date_input("Expense day", value=date.today())
        category = st.selectbox(
            "Expense category",
            list(DEFAULT_EXPENSE_CATEGORIES),
        )
        amount = st.number_input(
            "Expense amount (R$)", min_value=0.0, value=0.0, step=0.01
        )
        submitted = st.form_submit_button("Add expense")

    if not submitted:
        return
    try:
        stored = _submit_expense(record_date, amount, category)
    except (LookupError, ValueError) as exc:
        st.error(str(exc))
        return
    st.success(f"Added {stored.category} expense of {_format_currency(stored.amount)}.")


def _render_extra_earning_form() -> None:
    """Render the form adding an off-platform earning to a logged day."""
    with st.form("extra_earning", clear_on_submit=True):
        st.subheader("Add extra earning")
        record_date = st.date_input("Earning day", value=date.today())
        category = st.selectbox(
            "Earning category",
            list(DEFAULT_EXTRA_EARNING_CATEGORIES),
        )
        amount = st.number_input(
            "Earning amount (R$)", min_value=0.0, value=0.0, step=0.01
        )
        description = st.text_input("Description", value="")
        submitted = st.form_submit_button("Add earning")

    if not submitted:
        return
    try:
        stored = _submit_extra_earning(record_date, amount, category, description)
    except (LookupError, ValueError) as exc:
        st.error(str(exc))
        return
    st.success(f"Added {stored.category} earning of {_format_currency(stored.amount)}.")


def _render_delete_form() -> None:
    """Render the form deleting a whole day."""
    with st.form("delete_record"):
        st.subheader("Delete day")
        record_date = st.date_input("Day to delete", value=date.today())
        submitted = st.form_submit_button("Delete record")

    if not submitted:
        return
    if _delete_record(record_date):
        st.success(f"Deleted record for {record_date.isoformat()}.")
    else:
        st.warning(f"No record for {record_date.isoformat()}.")


def _render_log_day() -> None:
    _render_earnings_form()
    _render_expense_form()
    _render_extra_earning_form()
    _render_delete_form()


def _render_vehicle_form() -> None:
    """Render the form registering a vehicle and its rental terms."""
    with st.form("vehicle", clear_on_submit=True):
        st.subheader("Add vehicle")
        model = st.text_input("Model", value="", placeholder="Ex.: Onix 1.0")
        rent_col, limit_col, fee_col = st.columns(3)
        with rent_col:
            weekly_rent = st.number_input(
                "Weekly rent (R$)", min_value=0.0, value=0.0, step=10.0
            )
        with limit_col:
            weekly_km_limit = st.number_input(
                "Weekly km limit", min_value=0.0, value=0.0, step=50.0
            )
        with fee_col:
            overage_fee = st.number_input(
                "Overage fee (R$/km)", min_value=0.0, value=0.0, step=0.01
            )
        efficiency_col, price_col, goal_col = st.columns(3)
        with efficiency_col:
            efficiency = st.number_input(
                "Efficiency (km/l)", min_value=0.0, value=0.0, step=0.1
            )
        with price_col:
            fuel_price = st.number_input(
                "Fuel price (R$/l)", min_value=0.0, value=0.0, step=0.01
            )
        with goal_col:
            goal = st.number_input(
                "Weekly earnings goal (R$)", min_value=0.0, value=0.0, step=50.0
            )
        has_contract = st.checkbox("Rental contract", value=True)
        contract_start = st.date_input("Contract start", value=date.today())
        contract_days = st.number_input(
            "Contract days", min_value=0, value=0, step=1
        )
        is_active = st.checkbox("Active vehicle", value=True)
        submitted = st.form_submit_button("Save vehicle")

    if not submitted:
        return
    config = CarConfig(
        model=model.strip(),
        weekly_rent=coerce_decimal(weekly_rent),
        weekly_km_limit=coerce_decimal(weekly_km_limit),
        overage_fee_per_km=coerce_decimal(overage_fee),
        fuel_efficiency_km_l=coerce_decimal(efficiency),
        fuel_price=coerce_decimal(fuel_price),
        contract_start=contract_start if has_contract else None,
        contract_days=int(contract_days) if has_contract else 0,
        weekly_earnings_goal=coerce_decimal(goal),
        is_active=is_active,
    )
    try:
        stored = _save_vehicle(config)
    except ValueError as exc:
        st.error(str(exc))
        return
    st.success(f"Saved vehicle {stored.model}.")


def _render_vehicles(vehicles: Sequence[CarConfig]) -> None:
    """Render the vehicle table and the active vehicle switch."""
    st.subheader("Vehicles")
    if not vehicles:
        st.info("No vehicles yet.")
        return
    data = [
        {
            "Model": vehicle.model,
            "Active": vehicle.is_active,
            "Weekly rent": float(vehicle.weekly_rent),
            "Km limit": float(vehicle.weekly_km_limit),
            "Overage fee": float(vehicle.overage_fee_per_km),
            "Km/l": float(vehicle.fuel_efficiency_km_l),
            "Fuel price": float(vehicle.fuel_price),
            "Contract start": (
                vehicle.contract_start.isoformat()
                if vehicle.contract_start
                else ""
            ),
            "Contract days": vehicle.contract_days,
        }
        for vehicle in vehicles
    ]
    st.dataframe(data, width="stretch", hide_index=True)

    labels = {vehicle.id: vehicle.model for vehicle in vehicles}
    selected = st.selectbox(
        "Vehicle",
        list(labels),
        format_func=lambda config_id: labels[config_id],
    )
    if not st.button("Make active"):
        return
    try:
        activated = _activate_vehicle(selected)
    except LookupError as exc:
        st.error(str(exc))
        return
    st.success(f"{activated.model} is now the active vehicle.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Driver Dashboard", layout="wide")
    st.title("Driver Dashboard")
    usage_logger = get_usage_logger()

    page = st.sidebar.selectbox("Page", list(_PAGES))
    if page == "History":
        usage_logger.info("Opened history")
        _render_history(_load_history(None))
        return
    if page == "Log day":
        usage_logger.info("Opened log day")
        _render_log_day()
        return
    if page == "Vehicles":
        usage_logger.info("Opened vehicles")
        _render_vehicles(_fetch_vehicles())
        _render_vehicle_form()
        return

    period_label = st.sidebar.selectbox("Period", list(_PERIOD_LABELS))
    anchor = st.sidebar.date_input("Date", value=date.today())
    kind = _PERIOD_LABELS[period_label]
    usage_logger.info(f"Opened {kind.value} view for {anchor.isoformat()}")
    view = _load_dashboard(anchor, kind.value)
    _render_dashboard(view)


if __name__ == "__main__":  # pragma: no cover
    main()
