"""The normalizer port that language adapters implement, and its errors."""