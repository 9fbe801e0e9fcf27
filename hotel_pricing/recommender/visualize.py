"""
Charts for price recommendations.

Plots the occupancy projection curve and the competitor mix per category.
"""

import logging
from pathlib import Path
from typing import Optional

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import pandas as pd

logger = logging.getLogger(__name__)


def _save(fig: plt.Figure, output_path: Optional[Path]) -> None:
    if output_path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        logger.info(f"Saved to {output_path}")


def plot_occupancy_projection(
    projection: pd.DataFrame,
    market_average: float,
    output_path: Optional[Path] = None
) -> plt.Figure:
    """
    Plot recommended price across occupancy targets.

    Args:
        projection: Output of project_occupancy
        market_average: Weighted market average of the current scenario
        output_path: Optional path to save figure

    Returns:
        matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    occupancy_pct = projection['occupancy'] * 100
    ax.plot(occupancy_pct, projection['raw_price'], color='#95a5a6', linestyle='--',
            marker='o', label='Adjusted (before band)')
    ax.plot(occupancy_pct, projection['price'], color='#3498db', linewidth=2,
            marker='o', label='Recommended')

    current = projection[projection['is_current']]
    if len(current) > 0:
        ax.scatter(current['occupancy'] * 100, current['price'], s=160, color='#2ecc71',
                   zorder=5, label='Current target')

    ax.axhline(market_average, color='black', linestyle=':', linewidth=1,
               label=f'Market index €{market_average:.0f}')

    ax.set_xlabel('Target Occupancy (%)', fontsize=12)
    ax.set_ylabel('Price (€)', fontsize=12)
    ax.set_title('Price Projection by Occupancy Target', fontsize=14)
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    _save(fig, output_path)
    return fig


def plot_category_mix(
    breakdown: pd.DataFrame,
    output_path: Optional[Path] = None
) -> plt.Figure:
    """
    Plot average rate and occupancy per competitor category.

    Args:
        breakdown: Output of category_breakdown
        output_path: Optional path to save figure

    Returns:
        matplotlib Figure
    """
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    ax1 = axes[0]
    bars = ax1.bar(breakdown['label'], breakdown['average_rate'], color='#3498db', alpha=0.8)
    for bar, count in zip(bars, breakdown['count']):
        ax1.text(bar.get_x() + bar.get_width() / 2, bar.get_height(), f'n={count}',
                 ha='center', va='bottom', fontsize=10)
    ax1.set_ylabel('Average Rate (€)', fontsize=12)
    ax1.set_title('Average Rate by Segment', fontsize=14)

    ax2 = axes[1]
    ax2.bar(breakdown['label'], breakdown['average_occupancy'] * 100, color='#2ecc71', alpha=0.8)
    ax2.set_ylabel('Average Occupancy (%)', fontsize=12)
    ax2.set_ylim(0, 100)
    ax2.set_title('Occupancy by Segment', fontsize=14)

    plt.tight_layout()
    _save(fig, output_path)
    return fig
