#!/usr/bin/env python3
"""
Training Corpora
================
Built-in example corpora plus a loader for corpus files (one entry per line).
"""

from pathlib import Path
from typing import Dict, List, Union

from stateengines.settings import resolve_path


# =============================================================================
# BUILT-IN CORPORA
# =============================================================================

TRAINING_CORPUS = {
    # Angel names across traditions
    'angels': [
        'Abbadon', 'Adriel', 'Ambriel', 'Amesha Spenta', 'Arariel',
        'Ahriman', 'Ariel', 'Azazel', 'Azrael', 'Abymael',
        'Barachiel', 'Cassiel', 'Camael', "Darda'il", 'Dumah',
        'Eremiel', 'Gabriel', 'Gadreel', 'Gagiel', 'Hadraniel',
        'Haniel', 'Harut', 'Hesediel', 'Hamalat al-Arsh', 'Israfel',
        'Jegudiel', 'Jehoel', 'Jequn', 'Jerahmeel', 'Jophiel',
        'Kasdeja', 'Kiraman Katibin', 'Kushiel', 'Kosmiel', 'Leliel',
        'Lucifer', 'Maalik', 'Malik', 'Marut', 'Metatron',
        'Michael', 'Munkar', "Mu'aqqibat", 'Muriel', 'Nakir',
        'Nuriel', 'Ophanim', 'Orifiel', 'Pahaliah', 'Penemue',
        'Puriel', 'Qaphsiel', 'Raguel', 'Raphael', 'Raqib',
        'Raziel', 'Remiel', 'Ridwan', 'Sachiel', 'Samael',
        'Sandalphon', 'Sariel', 'Selaphiel', 'Seraphiel', 'Simiel',
        'Shamsiel', 'Tzaphqiel', 'Temeluchus', 'Uriel', 'Uzziel',
        'Yehudiel', 'Yerachmiel', 'Zabaniyah', 'Zachariel', 'Zadkiel',
        'Zephon', 'Zophiel',
    ],

    # Planets, moons and stars
    'celestial': [
        'Aurora', 'Stella', 'Luna', 'Nova', 'Vega',
        'Lyra', 'Andromeda', 'Cassiopeia', 'Polaris', 'Sirius',
        'Rigel', 'Altair', 'Deneb', 'Antares', 'Capella',
        'Arcturus', 'Aldebaran', 'Betelgeuse', 'Canopus', 'Orion',
        'Atlas', 'Titan', 'Europa', 'Callisto', 'Ganymede',
        'Triton', 'Proteus', 'Nereid', 'Mimas', 'Enceladus',
        'Dione', 'Rhea', 'Tethys', 'Phoebe', 'Miranda',
    ],

    # Greek and Roman mythology
    'mythology': [
        'Phoenix', 'Helios', 'Selene', 'Artemis', 'Apollo',
        'Hermes', 'Athena', 'Minerva', 'Jupiter', 'Saturn',
        'Neptune', 'Pluto', 'Venus', 'Mars', 'Mercury',
        'Ceres', 'Pallas', 'Juno', 'Vesta', 'Fortuna',
        'Victoria', 'Concordia', 'Chronos', 'Kairos', 'Hyperion',
        'Theia', 'Themis', 'Mnemosyne', 'Persephone', 'Demeter',
    ],
}


def list_corpora() -> Dict[str, int]:
    """Built-in corpus names with their sizes."""
    return {name: len(entries) for name, entries in TRAINING_CORPUS.items()}


def get_corpus(name: str) -> List[str]:
    """
    Get a built-in corpus by name.

    Raises:
        ValueError: If the corpus name is not found
    """
    entries = TRAINING_CORPUS.get(name)
    if entries is None:
        available = ', '.join(sorted(TRAINING_CORPUS))
        raise ValueError(f"Unknown corpus '{name}'. Available corpora: {available}")
    return list(entries)


def load_corpus_file(path: Union[str, Path]) -> List[str]:
    """
    Load a corpus from a UTF-8 text file.

    One entry per line; blank lines and lines starting with '#' are skipped.
    Relative paths resolve against the current directory.
    """
    filepath = resolve_path(str(path), base=Path.cwd())
    if not filepath.exists():
        raise FileNotFoundError(f"Corpus file not found: {filepath}")

    entries = []
    for line in filepath.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if line and not line.startswith('#'):
            entries.append(line)
    return entries


__all__ = [
    'TRAINING_CORPUS',
    'list_corpora',
    'get_corpus',
    'load_corpus_file',
]
