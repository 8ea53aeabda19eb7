"""Portal dapp module: wallet and bridge UI deployed next to a local node."""
