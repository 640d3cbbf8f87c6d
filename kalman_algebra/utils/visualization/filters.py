"""
Visualization functions for Kalman filter results.
"""
import numpy as np
import matplotlib.pyplot as plt


def plot_kalman_filter(xs, m_filt, P_filt, zs=None, measured_states=None,
                       save_path=None, title="Kalman Filter", n_sigma=2.0):
    """
    Plot Kalman filter estimates against the true states.

    Parameters
    ----------
    xs : ndarray [T, n_x]
        True states
    m_filt : ndarray [T, n_x]
        Filtered means
    P_filt : ndarray [T, n_x, n_x]
        Filtered covariances
    zs : ndarray [T, n_z], optional
        Observations, drawn on the axes of the states they measure
    measured_states : sequence of int, optional
        State index measured by each observation column (default: column i
        measures state i)
    save_path : str, optional
        Path to save figure; the figure is closed after saving
    title : str
        Plot title
    n_sigma : float
        Width of the uncertainty band in standard deviations

    Returns
    -------
    matplotlib.figure.Figure
    """
    T, n_x = m_filt.shape
    t = np.arange(T)

    fig, axes = plt.subplots(n_x, 1, figsize=(12, 4 * n_x), squeeze=False)
    axes = axes[:, 0]

    if zs is not None and measured_states is None:
        measured_states = list(range(zs.shape[1]))

    for i, ax in enumerate(axes):
        std_filt = np.sqrt(np.maximum(P_filt[:, i, i], 0.0))

        ax.plot(t, xs[:, i], 'k-', linewidth=2, label='True State', alpha=0.8)
        ax.plot(t, m_filt[:, i], 'b--', linewidth=1.5, label='Filter Mean', alpha=0.8)
        ax.fill_between(t, m_filt[:, i] - n_sigma * std_filt, m_filt[:, i] + n_sigma * std_filt,
                        alpha=0.2, color='blue', label=f'+/-{n_sigma:g}sigma')

        if zs is not None:
            for column, state in enumerate(measured_states):
                if state == i:
                    ax.plot(t, zs[:, column], 'r.', markersize=4, label='Measurement', alpha=0.6)

        ax.set_xlabel('Time')
        ax.set_ylabel(f'State {i+1}')
        ax.set_title(f'{title} - State {i+1}')
        ax.legend()
        ax.grid(True, alpha=0.3)

    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    return fig
