"""
Demo script showing multi-criteria sorting.

This script demonstrates:
1. Sorting dict records by field names
2. Mixing field names with accessor functions
3. Null placement
4. Sorting DataFrame rows
"""

import logging

import pandas as pd

from multisort import sort_by, sort_frame, sort_key

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s : %(name)s : %(message)s")

users = [
    {'user': 'foo', 'age': 24},
    {'user': 'bar', 'age': 7},
    {'user': 'foo ', 'age': 8},
    {'user': 'bar ', 'age': 29},
]

# Example 1: Field names
print("=" * 60)
print("Example 1: Sort by user, then age")
print("=" * 60)

for user in sort_by(users, ['user', 'age']):
    print(user)

# Example 2: Accessor functions
print("\n" + "=" * 60)
print("Example 2: Case-insensitive name, then age")
print("=" * 60)

for user in sort_by(users, [lambda u: u['user'].strip().upper(), 'age']):
    print(user)

# Example 3: Missing values
print("\n" + "=" * 60)
print("Example 3: Missing values last, then first")
print("=" * 60)

scores = [{'name': 'a', 'score': 3}, {'name': 'b'}, {'name': 'c', 'score': 1}]
print(sort_by(scores, ['score']))
print(sort_by(scores, ['score'], nulls='first'))
print("Lowest score:", min(scores, key=sort_key(['score'])))

# Example 4: DataFrames
print("\n" + "=" * 60)
print("Example 4: DataFrame rows")
print("=" * 60)

df = pd.DataFrame({
    'name': ['Alice', 'Bob', 'Charlie', 'David'],
    'dept': ['eng', 'sales', 'eng', None],
    'salary': [50000, 60000, 70000, 55000],
})
print(sort_frame(df, ['dept', lambda row: -row['salary']]))
