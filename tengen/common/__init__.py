# tengen/common - shared configuration helpers, independent of the board engine's state.
