from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from .text import ALPHABET, M


def plot_letter_frequencies(observed: np.ndarray, expected: Optional[np.ndarray] = None,
                            title: str = "Letter frequencies", outplot: Optional[str] = None):
    """
    Bar chart of ciphertext letter frequencies, next to the model's unigram
    table when given. Saved to `outplot` if set, otherwise shown.
    """
    x = np.arange(M)
    fig, ax = plt.subplots(figsize=(10, 4))
    width = 0.4 if expected is not None else 0.8
    ax.bar(x - (width / 2 if expected is not None else 0), observed, width, label="observed")
    if expected is not None:
        ax.bar(x + width / 2, expected, width, label="model")
    ax.set_xticks(x)
    ax.set_xticklabels(list(ALPHABET))
    ax.set_ylabel("Frequency")
    ax.set_title(title)
    ax.legend()
    fig.tight_layout()
    if outplot:
        fig.savefig(outplot)
        plt.close(fig)
    else:
        plt.show()
    return fig
