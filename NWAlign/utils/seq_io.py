"""
Sequence reading functions (FASTA format)
"""
from typing import Dict, List, Tuple


def read_records(filename: str) -> List[Tuple[str, str]]:
    """
    Read (name, sequence) records from a FASTA file in file order.
    Records sharing a header are all kept.

    Args:
        filename: Path to FASTA file

    Returns:
        list: (name, sequence) tuples
    """
    records = []
    current_name = None
    current_seq = []

    with open(filename, 'r') as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            if line.startswith('>'):
                if current_name is not None:
                    records.append((current_name, ''.join(current_seq)))
                parts = line[1:].split()
                current_name = parts[0] if parts else f"seq{len(records) + 1}"
                current_seq = []
            else:
                current_seq.append(line)

        if current_name is not None:
            records.append((current_name, ''.join(current_seq)))

    return records


def read_fasta(filename: str) -> Dict[str, str]:
    """
    Read sequences from FASTA format file

    Args:
        filename: Path to FASTA file

    Returns:
        dict: Dictionary mapping sequence names to sequences, in file order
        (a repeated name keeps its last sequence)

    Example:
        >>> sequences = read_fasta('seqs.fasta')
    """
    return dict(read_records(filename))


def read_pair(filename: str) -> Tuple[Tuple[str, str], Tuple[str, str]]:
    """
    First two records of a FASTA file as ((name, seq), (name, seq))

    Raises:
        ValueError: if the file holds fewer than two records
    """
    records = read_records(filename)
    if len(records) < 2:
        raise ValueError(f"Need two sequences in {filename}, found {len(records)}")
    return records[0], records[1]
