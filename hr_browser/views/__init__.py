from .attrition import AttritionContourView, AttritionSatisfactionView
from .income import (
    IncomeDensityByAgeView,
    IncomeDistanceDensityView,
    IncomeForestView,
    IncomeViolinByDepartmentView,
)
from .satisfaction import SatisfactionByDepartmentView, SatisfactionScatterView
from .demographic import (
    AgeByTenureView,
    EmployeeCountTimeseriesView,
    IncomeByAgeGroupView,
    TenureByAgeGroupView,
)
from .department import (
    AttritionFunnelView,
    IncomeByEducationView,
    JobRoleTreemapView,
    TenureBoxplotView,
)

# Grid order within each category
ALL_VIEWS = [
    AttritionContourView,
    AttritionSatisfactionView,
    IncomeDensityByAgeView,
    IncomeForestView,
    IncomeViolinByDepartmentView,
    IncomeDistanceDensityView,
    SatisfactionScatterView,
    SatisfactionByDepartmentView,
    AgeByTenureView,
    IncomeByAgeGroupView,
    TenureByAgeGroupView,
    EmployeeCountTimeseriesView,
    IncomeByEducationView,
    AttritionFunnelView,
    JobRoleTreemapView,
    TenureBoxplotView,
]

__all__ = [cls.__name__ for cls in ALL_VIEWS] + ["ALL_VIEWS"]
