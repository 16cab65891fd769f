# Application layer - ports used by the domain and implemented by infrastructure
