# grace

Building blocks for designing collagen-like triple-helix heterotrimers
(AAB or ABC). The package includes:

- a parameterised stability model that predicts the melting temperature (Tm)
  of every canonical register of a helix and the specificity between the best
  and second-best registers;
- the settings and population record of a genetic search;
- fitness ranking and selection of parents;
- readers for the parameter and amino-acid files;
- interactive prompts that collect a user's design targets.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input files

- `parameters.txt` is the scoring parameter set. It has named sections:
  `Date`, `Length` (terms A, B, C), `FrameShift` (the terminal table),
  `XaaPropensity`, `YaaPropensity`, `PairwiseLateral` and `PairwiseAxial`.
- `AminoAcids.csv` has a header line followed by one row per residue:
  `residue,Xaa,Yaa`. The `Xaa` and `Yaa` values are `1` if the residue is
  allowed at that position and `0` if it is excluded.

## Modules

### `grace.energy_params`

- `load_parameters(path="parameters.txt")` reads a parameter file.
  `parse_parameters(text)` parses file contents.
- Both return a `ScoringParameters`. Its tables are indexed by residue letter
  through `aa_index`, which maps `A` to 1 and `Z` to 26.
- A missing or malformed file raises `ParameterFileError`.
- `format_parameters(parameters)` renders a parameter set as text.

### `grace.helix`

`TripleHelix` holds up to three strands and the scores of their registers.
Its methods are:

- `is_xaa`, `is_yaa` and `is_gly`, which classify a position.
- `determine_repetition()`, which sets the reading frame from the first
  strand's Gly repeat. It issues a `RuntimeWarning` if there is no repeat.
- `dissect()`, which returns a plain-text report.
- `user_output(color=True)`, which returns a summary with optional ANSI
  colouring.

### `grace.pairwise` and `grace.scoring`

- `pairwise_calc(...)` finds the best sum of stabilising axial and lateral
  interactions along one interaction thread.
- `score_helix(parameters, helix)` returns a scored copy of a `TripleHelix`.
  The copy holds the Tm of every composition in the canonical offset, the
  best and second-best registers, the specificity, and the Tm of the
  intended composition (`cc_tm`).

### `grace.ga_parameters`

- `GAParameters` holds the search settings and the population (`helices`,
  each a list of peptide strings). `set_xaa_mutation_rate_to_zero` and
  `set_yaa_mutation_rate_to_zero` switch off mutation to a given residue.
- `gly_repetition(sequence)` checks for an approximate Gly-every-third
  repeat.
- `find_gly_at_every_third(sequence)` checks for an exact repeat and returns
  `(found, first_gly)`.

### `grace.fitness` and `grace.selection`

- `score_population(params, scoring_parameters)` scores each helix.
  `fitness_scores(params, scoring_parameters)` does the same and adds
  fitness values.
- Both return a `PopulationScores` with `tm`, `specificity`,
  `best_registers`, `helices` and `fitness`.
- Fitness weighs specificity and Tm equally. When a motif is set, it also
  rewards a best register of `{012}`.
- `find_two_highest(scores, population_size)` returns the indices of the two
  best scores.
- `selection(parents, scores)` returns a two-helix population and those
  indices.

### `grace.amino_acids` and `grace.prompts`

- `load_amino_acids(path="AminoAcids.csv")` and `parse_amino_acids(lines)`
  return an `AminoAcidTable`. It lists the allowed residues and those
  excluded at Xaa and Yaa. A bad table raises `AminoAcidTableError`.
- `collect_settings(ask, table)` asks the user for the design settings and
  returns them as `UserSettings`. `ask` is any callable that takes a prompt
  and returns the reply, such as `input`. It asks for:
  - a novel heterotrimer or a motif design;
  - for a motif: the motif length (3–15) and three motifs;
  - otherwise: AAB or ABC and a peptide length (21–40);
  - the target Tm (30–70) and the target specificity (10–35).
- `prompt_int`, `prompt_motif` and `validate_motif` are the building blocks
  of these prompts.

## What the package does not do

The package has no command to run. It does not generate a random starting
population, and it does not perform crossover or mutation. There is no loop
that evolves a population until the targets are met, and no generation
history is written to a file. The modules above provide scoring, fitness,
selection, file reading and settings collection. The search itself has to be
driven by your own code.