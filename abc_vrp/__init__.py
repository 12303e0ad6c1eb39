from .models import Node
from .config import FoodSourceConfig
from .food_source import FoodSource, RouteError
from .fitness import distance
from .localsearch import apply_exploitation
