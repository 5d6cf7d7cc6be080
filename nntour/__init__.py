from .config import GraphConfig
from .points import Point, PointSet, sample_points
from .distances import compute_distance_matrix, path_cost
from .greedy import GreedyTourBuilder, InvalidTourInput, TourResult, TourStep, build_tour
from .animator import AnimatorState, RenderState, TourAnimator, cumulative_cost, drive
from .session import ActivationOutcome, TourSession
