from .plotting import plot_convergence, plot_trajectory
