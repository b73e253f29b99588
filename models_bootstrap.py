# models_bootstrap.py
from department import models as _department_models
from employee import models as _employee_models
